# electruss/kernel/assemble.py
"""
ASSEMBLY: Global Stiffness Matrix and Load Vector
=================================================

PURPOSE:
--------
This module handles the scatter-add of element contributions into the
global stiffness matrix K and the placement of joint loads into the global
load vector F.

Assembly does not care what the element is. It only needs:
- Total number of DOFs
- For each element: its DOF map and its stiffness matrix in global axes

STORAGE:
--------
K is ONE contiguous, row-major (C-order) float64 buffer of shape
(ndof, ndof), allocated once from the node count. Contributions are always
ADDED: several members meet at the same joint, so the same (row, col) cell
receives several contributions.

USAGE:
------
    contributions = []
    for member in model.members:
        dof_map = member_dof_map(model, member)          # [ix, iy, jx, jy]
        ke = truss2d_global_stiffness(model, member)     # 4x4
        contributions.append((dof_map, ke))

    K = assemble_global_K(dof.ndof(model.n_nodes), contributions)
    F = assemble_load_vector(dof.ndof(model.n_nodes), [node.load for node in model.nodes])
"""

import numpy as np
from typing import Iterable, List, Sequence, Tuple


def assemble_global_K(
    ndof: int,
    contributions: Iterable[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble global stiffness matrix from element contributions.

    ALGORITHM:
    ----------
    K = zeros(ndof × ndof)
    for each element:
        for each (local_i, local_j) in element ke:
            K[dof_map[local_i], dof_map[local_j]] += ke[local_i, local_j]

    Parameters:
    -----------
    ndof : int
        Total number of DOFs in the system (2 × n_nodes for a plane truss)

    contributions : Iterable[Tuple[List[int], np.ndarray]]
        (dof_map, ke) pairs, one per element. ``ke`` must be square with
        side len(dof_map).

    Returns:
    --------
    np.ndarray
        Global stiffness matrix K, shape (ndof, ndof), C-contiguous.
        Symmetric positive semi-definite before supports are applied.
    """
    K = np.zeros((ndof, ndof), dtype=float, order='C')

    for dof_map, ke in contributions:
        n_element_dofs = len(dof_map)

        assert ke.shape == (n_element_dofs, n_element_dofs), \
            f"Element ke shape {ke.shape} doesn't match dof_map length {n_element_dofs}"

        for a in range(n_element_dofs):
            ia = dof_map[a]
            for b in range(n_element_dofs):
                ib = dof_map[b]
                K[ia, ib] += ke[a, b]

    return K


def add_nodal_load(
    F: np.ndarray,
    node: int,
    load_vector: Sequence[float],
    dof_per_node: int = 2
) -> None:
    """
    Add a joint load to the global load vector (in-place).

    Example:
    --------
    >>> F = np.zeros(6)  # 3 nodes, 2 DOF each
    >>> add_nodal_load(F, node=1, load_vector=[1000.0, -500.0])
    >>> # Now F[2] = 1000, F[3] = -500
    """
    base_dof = dof_per_node * node
    for i, val in enumerate(load_vector):
        F[base_dof + i] += val


def assemble_load_vector(
    ndof: int,
    loads: Sequence[Sequence[float]],
    dof_per_node: int = 2
) -> np.ndarray:
    """
    Global load vector from per-node loads given in node-ordinal order.

    Node ``i``'s (fx, fy) lands at DOFs 2*i and 2*i + 1.
    """
    F = np.zeros(ndof, dtype=float)
    for node, load_vector in enumerate(loads):
        add_nodal_load(F, node, load_vector, dof_per_node)
    return F
