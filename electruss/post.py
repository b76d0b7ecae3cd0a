# electruss/post.py
"""
POST-PROCESSING: Checks and Reports on a TrussResult
====================================================

PURPOSE:
--------
After ``compute`` returns, engineers want to:
- Verify the answer (global equilibrium, free-DOF residuals)
- Find the governing members (max tension, max compression)
- Tabulate results for reports and exports

EQUILIBRIUM:
------------
Reactions are R = K·d - F, so for any solved truss

    Σ Rx + Σ Fx ≈ 0        Σ Ry + Σ Fy ≈ 0

and on every FREE axis R itself should be ≈0. A large free-DOF residual
points to an ill-conditioned model (very different stiffnesses, nearly
collinear members) rather than a real support force.
"""

from typing import Any, Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from .analysis import TrussResult
from .elements import element_geometry
from .model import Member, Node, TrussModel


def equilibrium_residual(nodes: Sequence[Node], result: TrussResult) -> Tuple[float, float]:
    """(Σ Rx + Σ Fx, Σ Ry + Σ Fy) over all nodes; both ≈0 for a valid solve."""
    sum_x = 0.0
    sum_y = 0.0
    for node in nodes:
        reaction = result.reactions[node.id]
        sum_x += reaction.rx + node.load[0]
        sum_y += reaction.ry + node.load[1]
    return sum_x, sum_y


def free_dof_residual(nodes: Sequence[Node], result: TrussResult) -> float:
    """Largest |R| on an unrestrained axis."""
    worst = 0.0
    for node in nodes:
        reaction = result.reactions[node.id]
        if not node.fixed_x:
            worst = max(worst, abs(reaction.rx))
        if not node.fixed_y:
            worst = max(worst, abs(reaction.ry))
    return worst


def summarize(result: TrussResult) -> Dict[str, Any]:
    """
    Headline numbers of a result.

    Returns a dict with max_tension (>= 0), max_compression (magnitude,
    >= 0), max_displacement and max_displacement_node (None for an empty
    model).
    """
    forces = [force.axial_force for force in result.member_forces]
    max_tension = max([f for f in forces if f > 0], default=0.0)
    max_compression = abs(min([f for f in forces if f < 0], default=0.0))

    max_node = None
    max_value = -1.0
    for node_id, disp in result.displacements.items():
        if disp.magnitude > max_value:
            max_value = disp.magnitude
            max_node = node_id

    return {
        'max_tension': max_tension,
        'max_compression': max_compression,
        'max_displacement': result.max_displacement,
        'max_displacement_node': max_node,
    }


def node_table(nodes: Sequence[Node], result: TrussResult) -> pd.DataFrame:
    """One row per node: position, restraints, load, displacement, reaction."""
    rows = []
    for node in nodes:
        disp = result.displacements[node.id]
        reaction = result.reactions[node.id]
        rows.append({
            'node_id': node.id,
            'x': node.x,
            'y': node.y,
            'fixed_x': node.fixed_x,
            'fixed_y': node.fixed_y,
            'fx': node.load[0],
            'fy': node.load[1],
            'dx': disp.dx,
            'dy': disp.dy,
            'displacement': disp.magnitude,
            'rx': reaction.rx,
            'ry': reaction.ry,
        })
    return pd.DataFrame(rows)


def member_table(
    nodes: Sequence[Node],
    members: Sequence[Member],
    result: TrussResult,
) -> pd.DataFrame:
    """
    One row per member: connectivity, length, force, force type and stress.

    force_type is 'T' (tension), 'C' (compression) or '0'; stress is N/A.
    """
    model = TrussModel.build(list(nodes), list(members))
    rows = []
    for member, force in zip(model.members, result.member_forces):
        L, _, _ = element_geometry(model, member)
        rows.append({
            'member_id': member.id,
            'node_i': member.start,
            'node_j': member.end,
            'length': L,
            'area': member.area,
            'elastic_modulus': member.elastic_modulus,
            'axial_force': force.axial_force,
            'force_type': force.force_type,
            'stress': force.axial_force / member.area if member.area != 0 else np.nan,
        })
    return pd.DataFrame(rows)
