# electruss/errors.py
"""Failure types raised by the truss engine.

Every failure is fatal to the current ``compute`` call and carries a stable
``kind`` string so outer layers (API, CLI) can report it without parsing
messages.
"""


class TrussError(Exception):
    """Base class for all engine failures."""
    kind = "truss"


class InputShapeError(TrussError, TypeError):
    """Nodes or members were not given as ordered collections."""
    kind = "input_shape"


class NumericValidityError(TrussError, ValueError):
    """A coordinate, load, area or modulus is not a finite number."""
    kind = "numeric_validity"


class ConstraintShapeError(TrussError, ValueError):
    """A node's restraint state is missing or malformed."""
    kind = "constraint_shape"


class DuplicateNodeError(TrussError, ValueError):
    """Two nodes share the same identifier."""
    kind = "duplicate_node"


class TopologyError(TrussError, ValueError):
    """A member references an unknown node identifier."""
    kind = "topology"


class DegenerateMemberError(TrussError, ValueError):
    """A member is shorter than the minimum length tolerance."""
    kind = "degeneracy"


class KinematicError(TrussError, RuntimeError):
    """No free degrees of freedom remain after applying supports."""
    kind = "kinematic"


class MechanismError(TrussError, RuntimeError):
    """Raised when structure is unstable (singular stiffness matrix)."""
    kind = "singularity"


__all__ = [
    'TrussError',
    'InputShapeError',
    'NumericValidityError',
    'ConstraintShapeError',
    'DuplicateNodeError',
    'TopologyError',
    'DegenerateMemberError',
    'KinematicError',
    'MechanismError',
]
