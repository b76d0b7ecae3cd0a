# electruss/canvas.py
"""
Editor-side helpers: the diagram editor's shorthand translated into the
engine's data model, and canvas/model coordinate mapping.

None of this is used by ``compute``; it is what an editor (or the API) calls
before handing data to the engine.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from .config import CONFIG
from .errors import DegenerateMemberError
from .model import Member, MemberId, NodeId


def normalize_fixed_state(fixed: Any) -> Tuple[bool, bool]:
    """
    Editor restraint shorthand -> (fixed_x, fixed_y).

    >>> normalize_fixed_state(True)
    (True, True)
    >>> normalize_fixed_state({'x': True, 'y': False})
    (True, False)
    >>> normalize_fixed_state(None)
    (False, False)
    """
    if isinstance(fixed, bool):
        return fixed, fixed
    if isinstance(fixed, dict) and isinstance(fixed.get('x'), bool) and isinstance(fixed.get('y'), bool):
        return fixed['x'], fixed['y']
    return False, False


def canvas_to_model(x: float, y: float, scale: Optional[float] = None) -> Tuple[float, float]:
    """Canvas pixels (y down) -> model coordinates (y up)."""
    scale = CONFIG.canvas_scale if scale is None else scale
    return x / scale, -y / scale


def model_to_canvas(x: float, y: float, scale: Optional[float] = None) -> Tuple[float, float]:
    """Model coordinates (y up) -> canvas pixels (y down)."""
    scale = CONFIG.canvas_scale if scale is None else scale
    return x * scale, -y * scale


def default_member_id(start: NodeId, end: NodeId) -> str:
    return f"{start}-{end}"


def editor_member(
    start: NodeId,
    end: NodeId,
    member_id: Optional[MemberId] = None,
    area: Optional[float] = None,
    elastic_modulus: Optional[float] = None,
) -> Member:
    """
    A member as the editor creates it when two nodes are joined.

    Missing properties take the editor defaults from CONFIG. Joining a node
    to itself is refused.
    """
    if start == end:
        raise DegenerateMemberError(f"Edge cannot start and end at node {start!r}.")
    return Member(
        id=default_member_id(start, end) if member_id is None else member_id,
        start=start,
        end=end,
        area=CONFIG.default_area if area is None else area,
        elastic_modulus=CONFIG.default_elastic_modulus if elastic_modulus is None else elastic_modulus,
    )


def member_widths(
    members: Sequence[Member],
    width_range: Optional[Tuple[float, float]] = None,
) -> Dict[MemberId, float]:
    """
    Line width per member, linear in area between the configured bounds.

    The smallest area maps to the minimum width and the largest to the
    maximum. When all areas are equal every member gets the minimum width.
    """
    min_width, max_width = CONFIG.member_width_range if width_range is None else width_range
    if not members:
        return {}

    areas = [member.area for member in members]
    min_area = min(areas)
    span = max(areas) - min_area
    if span == 0:
        return {member.id: min_width for member in members}
    return {
        member.id: (member.area - min_area) / span * (max_width - min_width) + min_width
        for member in members
    }
