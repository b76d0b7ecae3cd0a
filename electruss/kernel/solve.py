# electruss/kernel/solve.py
"""Partitioned linear solve: Gaussian elimination with partial pivoting, reactions."""

import numpy as np
from typing import Sequence, Tuple

from ..errors import KinematicError, MechanismError

# Largest available pivot below this means the reduced stiffness is singular.
PIVOT_TOLERANCE = 1e-12


def _pivot_row(a: np.ndarray, k: int) -> int:
    """Row i >= k with the largest |a[i, k]|. argmax returns the first maximum, so a tie keeps the lowest row."""
    return k + int(np.argmax(np.abs(a[k:, k])))


def gauss_solve(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve A·x = b by Gaussian elimination with partial pivoting.

    For each pivot column k the row with the largest |A[i, k]|, i >= k, is
    swapped into place (ties go to the lowest row index). Entries below the
    pivot are eliminated across the remaining columns, then the upper
    triangular system is back-substituted from the last row to the first.

    Args:
        A: Square coefficient matrix (n x n), not modified
        b: Right-hand side (n,), not modified

    Returns:
        x: Solution vector (n,)

    Raises:
        MechanismError: If a pivot column has no entry >= PIVOT_TOLERANCE
    """
    a = np.array(A, dtype=float, order='C', copy=True)
    rhs = np.array(b, dtype=float, copy=True)
    n = rhs.shape[0]

    for k in range(n):
        pivot_row = _pivot_row(a, k)
        if abs(a[pivot_row, k]) < PIVOT_TOLERANCE:
            raise MechanismError('Stiffness matrix is singular; structure is unstable.')

        if pivot_row != k:
            a[[k, pivot_row]] = a[[pivot_row, k]]
            rhs[[k, pivot_row]] = rhs[[pivot_row, k]]

        factors = a[k + 1:, k] / a[k, k]
        a[k + 1:, k:] -= np.outer(factors, a[k, k:])
        rhs[k + 1:] -= factors * rhs[k]

    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        x[i] = (rhs[i] - a[i, i + 1:] @ x[i + 1:]) / a[i, i]
    return x


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    free_dofs: Sequence[int],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Solve K·d = F with every DOF outside ``free_dofs`` held at zero.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        free_dofs: Ascending list of unrestrained DOF indices

    Returns:
        d: Displacement vector (ndof,), exactly 0.0 at restrained DOFs
        R: Reaction vector (ndof,), R = K·d - F at EVERY DOF. On free DOFs
           this is the equilibrium residual (≈0), not a support force.

    Raises:
        KinematicError: If ``free_dofs`` is empty
        MechanismError: If the reduced system is singular
    """
    free = np.asarray(free_dofs, dtype=int)
    if free.size == 0:
        raise KinematicError('No free degrees of freedom remain after applying supports.')

    # Extract reduced system
    Kff = K[np.ix_(free, free)]
    Ff = F[free]

    df = gauss_solve(Kff, Ff)

    # Assemble full displacement
    d = np.zeros(K.shape[0], dtype=float)
    d[free] = df

    # Compute reactions: R = K·d - F
    R = K @ d - F

    return d, R
