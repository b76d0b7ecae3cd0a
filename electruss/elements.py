# Truss2D element geometry, global stiffness and axial force recovery

from typing import List, Tuple

import numpy as np

from .errors import DegenerateMemberError
from .kernel.dof import DOFManager, DOF_2D_TRUSS
from .model import Member, TrussModel

# Members at or below this length are rejected regardless of supports.
MIN_LENGTH_TOLERANCE = 1e-9


def element_geometry(model: TrussModel, member: Member) -> Tuple[float, float, float]:
    """
    Length and direction cosines (L, c, s) of ``member``, measured i -> j.

    Raises DegenerateMemberError when L <= MIN_LENGTH_TOLERANCE.
    """
    ni, nj = model.endpoints(member)
    dx = nj.x - ni.x
    dy = nj.y - ni.y
    L = float(np.hypot(dx, dy))
    if L <= MIN_LENGTH_TOLERANCE:
        raise DegenerateMemberError(
            f"Edge length must be greater than zero "
            f"(edge {member.id!r} has length {L:.3e})."
        )
    c = dx / L
    s = dy / L
    return L, c, s


def axial_stiffness(member: Member, L: float) -> float:
    return member.elastic_modulus * member.area / L


def truss2d_global_stiffness(model: TrussModel, member: Member) -> np.ndarray:
    """
    4x4 member stiffness in global axes.
    DOF order: [uix, uiy, ujx, ujy]

        ke = (EA/L) * [  c²   cs  -c²  -cs ]
                      [  cs   s²  -cs  -s² ]
                      [ -c²  -cs   c²   cs ]
                      [ -cs  -s²   cs   s² ]
    """
    L, c, s = element_geometry(model, member)
    k = axial_stiffness(member, L)
    ke = np.array([
        [ c*c,  c*s, -c*c, -c*s],
        [ c*s,  s*s, -c*s, -s*s],
        [-c*c, -c*s,  c*c,  c*s],
        [-c*s, -s*s,  c*s,  s*s],
    ], dtype=float)
    return k * ke


def member_dof_map(model: TrussModel, member: Member, dof: DOFManager = DOF_2D_TRUSS) -> List[int]:
    return dof.element_dof_map([model.ordinal(member.start), model.ordinal(member.end)])


def truss2d_axial_force(
    model: TrussModel,
    member: Member,
    d_global: np.ndarray,
    dof: DOFManager = DOF_2D_TRUSS,
) -> float:
    """
    Axial force from global displacements. Positive = tension.

    Geometry is recomputed here rather than reused from assembly:
        elongation = -c*uix - s*uiy + c*ujx + s*ujy
        N = (EA/L) * elongation
    """
    L, c, s = element_geometry(model, member)
    uix, uiy, ujx, ujy = (d_global[i] for i in member_dof_map(model, member, dof))
    elongation = -c * uix - s * uiy + c * ujx + s * ujy
    return float(axial_stiffness(member, L) * elongation)
