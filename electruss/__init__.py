# electruss - 2D truss analysis engine
"""
ELECTRUSS: Linear-Elastic Analysis of 2D Pin-Jointed Trusses
============================================================

This package provides:
- A pure, stateless direct-stiffness engine: ``compute(nodes, members)``
- Validated model types (Node, Member) and a typed error hierarchy
- Editor helpers, JSON documents, result tables, plots, and a CLI

ARCHITECTURE:
-------------
    kernel/         DOF indexing/partitioning, assembly, Gaussian elimination
    model.py        Node, Member, TrussModel (validation + indexing)
    elements.py     Truss member geometry, 4x4 stiffness, axial force
    analysis.py     compute() pipeline and TrussResult
    post.py         Equilibrium checks, summaries, pandas tables
    canvas.py       Editor shorthand and canvas coordinate mapping
    io.py           Document save/load
    viz.py          Deformed shape plot
"""

from .analysis import (
    MemberForce,
    NodeDisplacement,
    NodeReaction,
    TrussResult,
    compute,
)
from .errors import (
    ConstraintShapeError,
    DegenerateMemberError,
    DuplicateNodeError,
    InputShapeError,
    KinematicError,
    MechanismError,
    NumericValidityError,
    TopologyError,
    TrussError,
)
from .model import Member, Node, NodeId, TrussModel

__version__ = "0.1.0"

__all__ = [
    'compute',
    'Node',
    'Member',
    'NodeId',
    'TrussModel',
    'TrussResult',
    'NodeDisplacement',
    'NodeReaction',
    'MemberForce',
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
