# electruss/analysis.py
"""
ANALYSIS: The compute() Pipeline
================================

PURPOSE:
--------
One synchronous, pure pass from caller data to results:

    1. TrussModel.build        validate + index nodes by id (ordinal = input position)
    2. assemble_stiffness      scatter-add every member's 4x4 into K (2N x 2N)
    3. assemble_loads          joint loads into F (2N)
    4. DOFManager.partition    free / restrained DOFs from support flags
    5. solve_linear            Gaussian elimination on K[free, free]
    6. reactions + forces      R = K·d - F at every DOF, N = (EA/L)·elongation
    7. TrussResult             arrays mapped back to the caller's identifiers

Nothing is cached between calls and the caller's collections are never
modified. Any failure raises a ``TrussError`` subclass and no partial result
is produced.

USAGE:
------
    from electruss import compute, Node, Member

    nodes = [
        Node('a', 0.0, 0.0, fixed=(True, True)),
        Node('b', 1.0, 0.0, fixed=(False, True), load=(1000.0, 0.0)),
    ]
    members = [Member('m1', 'a', 'b', area=0.01, elastic_modulus=200e9)]

    result = compute(nodes, members)
    result.displacements['b'].dx        # 5e-7
    result.member_force('m1')           # 1000.0 (tension)
    result.reactions['a'].rx            # -1000.0
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from .elements import member_dof_map, truss2d_axial_force, truss2d_global_stiffness
from .kernel.assemble import assemble_global_K, assemble_load_vector
from .kernel.dof import DOF_2D_TRUSS
from .kernel.solve import solve_linear
from .model import MemberId, NodeId, TrussModel


@dataclass(frozen=True)
class NodeDisplacement:
    dx: float
    dy: float

    @property
    def magnitude(self) -> float:
        return float(np.hypot(self.dx, self.dy))


@dataclass(frozen=True)
class NodeReaction:
    """
    Constraint force at a node, R = K·d - F per axis.

    Reported for every node. On an unrestrained axis the value is an
    equilibrium residual (≈0) and works as a consistency check of the solve,
    not as a physical support force.
    """
    rx: float
    ry: float


@dataclass(frozen=True)
class MemberForce:
    id: MemberId
    axial_force: float

    @property
    def force_type(self) -> str:
        """'T' for tension, 'C' for compression, '0' for an unloaded member."""
        if self.axial_force > 0:
            return 'T'
        if self.axial_force < 0:
            return 'C'
        return '0'


@dataclass(frozen=True)
class TrussResult:
    """
    Output of one ``compute`` call.

    Attributes:
    -----------
    displacements : Dict[NodeId, NodeDisplacement]
        Per node, in node input order
    reactions : Dict[NodeId, NodeReaction]
        Per node (ALL nodes, not only supports), in node input order
    member_forces : List[MemberForce]
        Per member, in member input order; positive = tension
    max_displacement : float
        Largest |(dx, dy)| over all nodes
    """
    displacements: Dict[NodeId, NodeDisplacement]
    reactions: Dict[NodeId, NodeReaction]
    member_forces: List[MemberForce]
    max_displacement: float

    def member_force(self, member_id: MemberId) -> float:
        for force in self.member_forces:
            if force.id == member_id:
                return force.axial_force
        raise KeyError(member_id)


def assemble_stiffness(model: TrussModel) -> np.ndarray:
    """Global stiffness K of ``model`` before supports are applied."""
    contributions = [
        (member_dof_map(model, member), truss2d_global_stiffness(model, member))
        for member in model.members
    ]
    return assemble_global_K(DOF_2D_TRUSS.ndof(model.n_nodes), contributions)


def assemble_loads(model: TrussModel) -> np.ndarray:
    return assemble_load_vector(
        DOF_2D_TRUSS.ndof(model.n_nodes),
        [node.load for node in model.nodes],
    )


def max_displacement(d: np.ndarray) -> float:
    """Largest nodal displacement magnitude in a flat [ux0, uy0, ux1, uy1, ...] vector."""
    if d.size == 0:
        return 0.0
    pairs = d.reshape(-1, 2)
    return float(np.max(np.hypot(pairs[:, 0], pairs[:, 1])))


def analyze(model: TrussModel) -> TrussResult:
    """Run the direct stiffness method on an already validated model."""
    dof = DOF_2D_TRUSS

    K = assemble_stiffness(model)
    F = assemble_loads(model)

    free, _ = dof.partition(model.restraints)
    d, R = solve_linear(K, F, free)

    member_forces = [
        MemberForce(member.id, truss2d_axial_force(model, member, d, dof))
        for member in model.members
    ]

    displacements = {}
    reactions = {}
    for ordinal, node in enumerate(model.nodes):
        ix, iy = dof.node_dofs(ordinal)
        displacements[node.id] = NodeDisplacement(float(d[ix]), float(d[iy]))
        reactions[node.id] = NodeReaction(float(R[ix]), float(R[iy]))

    return TrussResult(
        displacements=displacements,
        reactions=reactions,
        member_forces=member_forces,
        max_displacement=max_displacement(d),
    )


def compute(nodes: Sequence[Any], members: Sequence[Any]) -> TrussResult:
    """
    Calculate nodal displacements, member axial forces, and support
    reactions for a 2D truss.

    Parameters:
    -----------
    nodes : list or tuple
        ``Node`` objects or editor payload mappings
        ({"id", "x", "y", "fixed": {"x", "y"}, "load": {"fx", "fy"}})
    members : list or tuple
        ``Member`` objects or editor payload mappings
        ({"id", "from", "to", "area", "elastic_modulus"})

    Returns:
    --------
    TrussResult

    Raises:
    -------
    TrussError
        InputShapeError, NumericValidityError, ConstraintShapeError,
        DuplicateNodeError, TopologyError, DegenerateMemberError,
        KinematicError or MechanismError
    """
    return analyze(TrussModel.build(nodes, members))
