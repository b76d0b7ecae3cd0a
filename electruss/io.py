# electruss/io.py
"""
Saving and loading truss documents.

A document is the editor's own save format, a JSON object holding a
timestamp and the raw node/edge arrays:

    {
      "time": "2026-10-16T12:00:00+00:00",
      "nodes": [{"id": 1, "x": 0.0, "y": 0.0, "fixed": {"x": true, "y": true},
                 "load": {"fx": 0.0, "fy": 0.0}}, ...],
      "edges": [{"id": "1-2", "from": 1, "to": 2, "area": 1.0,
                 "elastic_modulus": 1e9}, ...]
    }

Loading validates every entry through ``Node.from_dict`` / ``Member.from_dict``
so a loaded document is ready for ``compute``.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .analysis import TrussResult
from .errors import InputShapeError
from .model import Member, Node

PathLike = Union[str, Path]


def model_to_document(
    nodes: Sequence[Node],
    members: Sequence[Member],
    time: Optional[datetime] = None,
) -> Dict[str, Any]:
    stamp = time if time is not None else datetime.now(timezone.utc)
    return {
        'time': stamp.isoformat(),
        'nodes': [node.to_dict() for node in nodes],
        'edges': [member.to_dict() for member in members],
    }


def document_to_model(document: Dict[str, Any]) -> Tuple[List[Node], List[Member]]:
    """Validated (nodes, members) from a document dict."""
    if not isinstance(document, dict):
        raise InputShapeError('Document must be a JSON object.')
    raw_nodes = document.get('nodes')
    raw_edges = document.get('edges')
    if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
        raise InputShapeError('Document must hold "nodes" and "edges" arrays.')
    nodes = [Node.from_dict(entry) for entry in raw_nodes]
    members = [Member.from_dict(entry) for entry in raw_edges]
    return nodes, members


def save_document(
    path: PathLike,
    nodes: Sequence[Node],
    members: Sequence[Member],
    time: Optional[datetime] = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(model_to_document(nodes, members, time), indent=2))
    return path


def load_document(path: PathLike) -> Tuple[List[Node], List[Member]]:
    return document_to_model(json.loads(Path(path).read_text()))


def result_to_dict(result: TrussResult) -> Dict[str, Any]:
    """JSON-ready form of a result; identifiers are kept as given."""
    return {
        'displacements': [
            {'id': node_id, 'dx': disp.dx, 'dy': disp.dy}
            for node_id, disp in result.displacements.items()
        ],
        'reactions': [
            {'id': node_id, 'rx': reaction.rx, 'ry': reaction.ry}
            for node_id, reaction in result.reactions.items()
        ],
        'member_forces': [
            {'id': force.id, 'axial_force': force.axial_force}
            for force in result.member_forces
        ],
        'max_displacement': result.max_displacement,
    }
