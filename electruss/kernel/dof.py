# electruss/kernel/dof.py
"""
DOF MANAGER: Degree of Freedom Indexing and Boundary Partitioning
=================================================================

PURPOSE:
--------
This module handles the mapping from (node ordinal, local_dof) to global DOF
indices, and the split of those DOFs into FREE and RESTRAINED sets.

A 2D pin-jointed truss has 2 DOF per node (ux, uy), addressed contiguously:

    node ordinal i  ->  x: 2*i,  y: 2*i + 1

The ordinal is the node's position in the caller's input order, so the
addressing is stable and deterministic for a given input.

USAGE:
------
    dof = DOFManager()                       # 2 DOF per node
    dof.idx(3, 1)                            # -> 7 (node 3, uy)
    dof.element_dof_map([0, 2])              # -> [0, 1, 4, 5]
    free, fixed = dof.partition([(True, True), (False, True)])
    # free -> [2], fixed -> [0, 1, 3]
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import KinematicError


@dataclass(frozen=True)
class DOFManager:
    """
    Manages degree-of-freedom indexing for truss analysis.

    Attributes:
    -----------
    dof_per_node : int
        Number of DOFs per node (2 for a plane truss: ux, uy)

    Examples:
    ---------
    >>> dof = DOFManager()
    >>> dof.idx(0, 0)  # Node 0, ux
    0
    >>> dof.idx(1, 1)  # Node 1, uy
    3
    >>> dof.ndof(4)
    8
    """
    dof_per_node: int = 2

    def idx(self, node: int, local_dof: int) -> int:
        """Global DOF index of ``local_dof`` (0=ux, 1=uy) at node ordinal ``node``."""
        return self.dof_per_node * node + local_dof

    def ndof(self, n_nodes: int) -> int:
        return self.dof_per_node * n_nodes

    def node_dofs(self, node: int) -> List[int]:
        """
        All global DOF indices for a single node.

        >>> DOFManager().node_dofs(2)
        [4, 5]
        """
        base = self.dof_per_node * node
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, nodes: Sequence[int]) -> List[int]:
        """
        DOF map for an element joining ``nodes`` (ordinals), in node order.

        For a truss member i -> j this is [ix, iy, jx, jy], the row/column
        order of the member's 4x4 stiffness matrix.
        """
        result = []
        for node in nodes:
            result.extend(self.node_dofs(node))
        return result

    def partition(self, restraints: Sequence[Sequence[bool]]) -> Tuple[List[int], List[int]]:
        """
        Split DOFs into free and restrained lists.

        Nodes are scanned in ordinal order and, within a node, x before y,
        so both lists come out in ascending DOF order.

        Parameters:
        -----------
        restraints : Sequence[Sequence[bool]]
            Per-node restraint flags, one entry per local DOF
            (for a plane truss: (fixed_x, fixed_y))

        Returns:
        --------
        (free, restrained) : Tuple[List[int], List[int]]

        Raises:
        -------
        KinematicError
            If every DOF is restrained (nothing left to solve for)
        """
        free: List[int] = []
        restrained: List[int] = []
        for node, flags in enumerate(restraints):
            for local_dof, is_fixed in enumerate(flags):
                target = restrained if is_fixed else free
                target.append(self.idx(node, local_dof))

        if not free:
            raise KinematicError('No free degrees of freedom remain after applying supports.')
        return free, restrained


DOF_2D_TRUSS = DOFManager(dof_per_node=2)   # ux, uy
