"""
VISUALIZATION: DEFORMED SHAPE AND MEMBER FORCES
================================================

PURPOSE:
--------
Draws a solved truss:
- Undeformed members (dashed, neutral colour)
- Deformed members at an exaggerated scale, coloured by axial force
  (red = tension, blue = compression, white = unloaded) with line width
  proportional to member area
- Support symbols per restrained axis
- Load arrows at loaded joints

Real truss displacements are tiny compared to member lengths. The deformed
shape is scaled so the largest displacement is a fixed fraction of the
structure's size unless an explicit ``scale`` is passed.
"""

import os
from typing import Dict, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.cm as cm
import matplotlib.colors as mcolors
from matplotlib.lines import Line2D

from .analysis import TrussResult
from .canvas import member_widths
from .config import CONFIG
from .model import Member, Node

COLORS = {
    'structure_primary': '#2C3E50',      # Dark blue-gray (undeformed)
    'background': '#FAFAFA',             # Off-white
    'grid': '#E0E0E0',                   # Light gray
    'load': '#9B59B6',                   # Purple
    'support': '#27AE60',                # Green
    'text': '#2C3E50',
}

# Width range in points; the editor range (pixels) is too heavy for a figure
PLOT_WIDTH_RANGE = (1.0, 5.0)


def auto_scale(nodes: Sequence[Node], result: TrussResult, ratio: Optional[float] = None) -> float:
    """Deformation scale that makes the largest displacement ``ratio`` × model size."""
    ratio = CONFIG.plot_deformation_ratio if ratio is None else ratio
    if not nodes or result.max_displacement == 0.0:
        return 1.0
    xs = [node.x for node in nodes]
    ys = [node.y for node in nodes]
    size = max(max(xs) - min(xs), max(ys) - min(ys))
    if size == 0.0:
        return 1.0
    return ratio * size / result.max_displacement


def _support_marker(fixed) -> Optional[str]:
    if fixed[0] and fixed[1]:
        return '^'     # pin
    if fixed[1]:
        return 'o'     # roller, restrained in y
    if fixed[0]:
        return '>'     # roller, restrained in x
    return None


def plot_truss(
    nodes: Sequence[Node],
    members: Sequence[Member],
    result: TrussResult,
    outpath: str,
    scale: Optional[float] = None,
    title: str = "Truss: Deformed Shape and Axial Forces",
) -> str:
    """
    Plot undeformed and deformed truss with member forces and save to file.

    Parameters:
    -----------
    nodes, members : sequences
        The model passed to ``compute``
    result : TrussResult
        Output of ``compute`` for that model
    outpath : str
        Image path (.png, .pdf, .svg); the directory is created if needed
    scale : float, optional
        Deformation magnification; chosen automatically when omitted
    title : str
        Plot title

    Returns:
    --------
    str
        ``outpath``
    """
    if scale is None:
        scale = auto_scale(nodes, result)

    by_id: Dict = {node.id: node for node in nodes}
    deformed = {
        node.id: (
            node.x + scale * result.displacements[node.id].dx,
            node.y + scale * result.displacements[node.id].dy,
        )
        for node in nodes
    }

    forces = {force.id: force.axial_force for force in result.member_forces}
    abs_max = max((abs(f) for f in forces.values()), default=0.0) or 1.0
    norm = mcolors.TwoSlopeNorm(vmin=-abs_max, vcenter=0.0, vmax=abs_max)
    cmap = cm.coolwarm
    widths = member_widths(members, PLOT_WIDTH_RANGE)

    fig, ax = plt.subplots(figsize=(10, 8))
    fig.patch.set_facecolor(COLORS['background'])
    ax.set_facecolor(COLORS['background'])

    # Undeformed
    for member in members:
        ni, nj = by_id[member.start], by_id[member.end]
        ax.plot([ni.x, nj.x], [ni.y, nj.y], '--',
                color=COLORS['structure_primary'], linewidth=1, alpha=0.5, zorder=1)

    # Deformed, coloured by force
    for member in members:
        (xi, yi), (xj, yj) = deformed[member.start], deformed[member.end]
        ax.plot([xi, xj], [yi, yj], '-',
                color=cmap(norm(forces.get(member.id, 0.0))),
                linewidth=widths.get(member.id, PLOT_WIDTH_RANGE[0]),
                solid_capstyle='round', zorder=2)

    xs = np.array([deformed[node.id][0] for node in nodes])
    ys = np.array([deformed[node.id][1] for node in nodes])
    ax.plot(xs, ys, 'o', color=COLORS['structure_primary'], markersize=5, zorder=3)

    # Supports
    for node in (n for n in nodes if n.is_support):
        marker = _support_marker(node.fixed)
        if marker is not None:
            ax.plot(node.x, node.y, marker, color=COLORS['support'],
                    markersize=12, markeredgecolor='k', zorder=4)

    # Loads, drawn as unit-length arrows scaled to the largest load
    loads = [node.load for node in nodes]
    load_max = max((float(np.hypot(fx, fy)) for fx, fy in loads), default=0.0)
    if load_max > 0.0:
        span = max(float(np.ptp([n.x for n in nodes])), float(np.ptp([n.y for n in nodes])), 1e-9)
        arrow = 0.15 * span
        for node in nodes:
            fx, fy = node.load
            if fx == 0.0 and fy == 0.0:
                continue
            ux, uy = fx / load_max * arrow, fy / load_max * arrow
            ax.annotate('', xy=(node.x, node.y), xytext=(node.x - ux, node.y - uy),
                        arrowprops=dict(arrowstyle='->', color=COLORS['load'], lw=2), zorder=5)

    sm = cm.ScalarMappable(norm=norm, cmap=cmap)
    sm.set_array([])
    cbar = fig.colorbar(sm, ax=ax)
    cbar.set_label("Axial force\n(+ tension, - compression)")

    legend = [
        Line2D([0], [0], linestyle='--', color=COLORS['structure_primary'], label='Undeformed'),
        Line2D([0], [0], linestyle='-', color=cmap(norm(abs_max)), linewidth=3,
               label=f'Deformed (×{scale:.3g})'),
    ]
    ax.legend(handles=legend, loc='best', fontsize=9, framealpha=0.9)

    ax.set_title(title, fontsize=13, fontweight='bold', color=COLORS['text'])
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.grid(True, color=COLORS['grid'], linestyle='--', alpha=0.7)
    ax.set_aspect('equal')

    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return outpath
