# electruss/model.py
"""
MODEL DEFINITIONS: Node, Member and the indexed TrussModel
==========================================================

PURPOSE:
--------
This module defines the validated data structures the engine works on:
- Node: a pin joint with position, restraint state and applied load
- Member: an axial-only bar joining two nodes
- TrussModel: the ordered, indexed collection handed to the kernel

Validation happens exactly once, when a Node or Member is constructed
(directly or through ``from_dict``). Downstream code (assembly, solve,
post-processing) trusts these objects and never re-checks them.

IDENTIFIERS:
------------
Node and member identifiers are ``int`` or ``str`` (``NodeId``). The
position of a node in the input sequence is its ORDINAL, and the ordinal
is what addresses the stiffness matrix:

    node ordinal i  ->  DOF 2*i (x), DOF 2*i + 1 (y)
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import (
    ConstraintShapeError,
    DuplicateNodeError,
    InputShapeError,
    NumericValidityError,
    TopologyError,
)

NodeId = Union[int, str]
MemberId = Union[int, str]


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_identifier(value: Any) -> bool:
    return isinstance(value, (int, str)) and not _is_bool(value)


def _finite(value: Any, message: str) -> float:
    """Return ``value`` as a float, or raise NumericValidityError."""
    if _is_bool(value) or not isinstance(value, Real):
        raise NumericValidityError(message)
    try:
        number = float(value)
    except OverflowError as e:
        # ints beyond the float range
        raise NumericValidityError(message) from e
    if not math.isfinite(number):
        raise NumericValidityError(message)
    return number


def _is_ordered_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True)
class Node:
    """
    A pin joint in the plane.

    Parameters:
    -----------
    id : NodeId
        Unique identifier within one analysis (int or str)
    x, y : float
        Position in the global coordinate system
    fixed : Tuple[bool, bool]
        Restraint state (fixed_x, fixed_y); each axis is independent
    load : Tuple[float, float]
        Applied joint load (fx, fy), defaults to no load

    Examples:
    ---------
    >>> Node('a', 0.0, 0.0, fixed=(True, True))       # pin support
    >>> Node('b', 1.0, 0.0, fixed=(False, True))      # roller on y
    >>> Node(3, 2.0, 1.0, fixed=(False, False), load=(0.0, -1000.0))
    """
    id: NodeId
    x: float
    y: float
    fixed: Tuple[bool, bool]
    load: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        if not _is_identifier(self.id):
            raise InputShapeError(f"Node id must be an int or str, got {self.id!r}.")
        object.__setattr__(self, 'x', _finite(self.x, 'Node x coordinate must be finite.'))
        object.__setattr__(self, 'y', _finite(self.y, 'Node y coordinate must be finite.'))
        object.__setattr__(self, 'fixed', _restraint_pair(self.fixed))
        object.__setattr__(self, 'load', _load_pair(self.load))

    @property
    def fixed_x(self) -> bool:
        return self.fixed[0]

    @property
    def fixed_y(self) -> bool:
        return self.fixed[1]

    @property
    def is_support(self) -> bool:
        return self.fixed[0] or self.fixed[1]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        """
        Build a Node from an editor payload.

        Expected shape (extra keys such as shape/size/color are ignored):
            {"id": 1, "x": 0.0, "y": 0.0,
             "fixed": {"x": True, "y": False},
             "load": {"fx": 0.0, "fy": -10.0}}
        """
        if not isinstance(data, Mapping):
            raise InputShapeError(f"Node entries must be mappings, got {type(data).__name__}.")
        if 'id' not in data:
            raise InputShapeError('Nodes must define an id.')
        return cls(
            id=data['id'],
            x=data.get('x'),
            y=data.get('y'),
            fixed=data.get('fixed'),
            load=data.get('load'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'x': self.x,
            'y': self.y,
            'fixed': {'x': self.fixed[0], 'y': self.fixed[1]},
            'load': {'fx': self.load[0], 'fy': self.load[1]},
        }


def _restraint_pair(fixed: Any) -> Tuple[bool, bool]:
    if isinstance(fixed, Mapping):
        fx, fy = fixed.get('x'), fixed.get('y')
    elif isinstance(fixed, (list, tuple)) and len(fixed) == 2:
        fx, fy = fixed
    else:
        raise ConstraintShapeError('Nodes must define fixed.x and fixed.y booleans.')
    if not (_is_bool(fx) and _is_bool(fy)):
        raise ConstraintShapeError('Nodes must define fixed.x and fixed.y booleans.')
    return bool(fx), bool(fy)


def _load_pair(load: Any) -> Tuple[float, float]:
    if load is None:
        return 0.0, 0.0
    if isinstance(load, Mapping):
        fx = load.get('fx')
        fy = load.get('fy')
    elif isinstance(load, (list, tuple)) and len(load) == 2:
        fx, fy = load
    else:
        raise NumericValidityError('Node load must provide fx and fy.')
    fx = 0.0 if fx is None else fx
    fy = 0.0 if fy is None else fy
    return (
        _finite(fx, 'Node load fx must be finite.'),
        _finite(fy, 'Node load fy must be finite.'),
    )


@dataclass(frozen=True)
class Member:
    """
    An axial-only bar joining two nodes.

    Parameters:
    -----------
    id : MemberId
        Identifier for this member
    start, end : NodeId
        Identifiers of the end nodes (i -> j defines the local axis)
    area : float
        Cross-sectional area
    elastic_modulus : float
        Young's modulus, in units consistent with area and loads

    Axial stiffness is k = E*A/L. Positive axial force means tension.
    """
    id: MemberId
    start: NodeId
    end: NodeId
    area: float
    elastic_modulus: float

    def __post_init__(self):
        if not _is_identifier(self.id):
            raise InputShapeError(f"Member id must be an int or str, got {self.id!r}.")
        object.__setattr__(self, 'area', _finite(self.area, 'Edge area must be finite.'))
        object.__setattr__(
            self,
            'elastic_modulus',
            _finite(self.elastic_modulus, 'Edge elastic modulus must be finite.'),
        )

    @property
    def axial_rigidity(self) -> float:
        """E*A, the numerator of the axial stiffness."""
        return self.elastic_modulus * self.area

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Member":
        """
        Build a Member from an editor payload.

        Expected shape:
            {"id": "m1", "from": 1, "to": 2, "area": 0.01, "elastic_modulus": 2e11}

        A missing id falls back to "<from>-<to>", the editor's own default.
        """
        if not isinstance(data, Mapping):
            raise InputShapeError(f"Edge entries must be mappings, got {type(data).__name__}.")
        start = data.get('from')
        end = data.get('to')
        member_id = data.get('id')
        if member_id is None:
            member_id = f"{start}-{end}"
        return cls(
            id=member_id,
            start=start,
            end=end,
            area=data.get('area'),
            elastic_modulus=data.get('elastic_modulus'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'from': self.start,
            'to': self.end,
            'area': self.area,
            'elastic_modulus': self.elastic_modulus,
        }


def _coerce_node(entry: Any) -> Node:
    return entry if isinstance(entry, Node) else Node.from_dict(entry)


def _coerce_member(entry: Any) -> Member:
    return entry if isinstance(entry, Member) else Member.from_dict(entry)


@dataclass(frozen=True)
class TrussModel:
    """
    Validated, indexed truss ready for assembly.

    Build it with ``TrussModel.build(nodes, members)``; the ``index`` maps
    every node id to its ordinal (input position), which fixes DOF
    addressing for the whole analysis.
    """
    nodes: Tuple[Node, ...]
    members: Tuple[Member, ...]
    index: Dict[NodeId, int] = field(repr=False)

    @classmethod
    def build(cls, nodes: Sequence[Any], members: Sequence[Any]) -> "TrussModel":
        if not _is_ordered_collection(nodes) or not _is_ordered_collection(members):
            raise InputShapeError('Nodes and edges must be arrays.')

        node_list = tuple(_coerce_node(entry) for entry in nodes)
        index: Dict[NodeId, int] = {}
        for ordinal, node in enumerate(node_list):
            if node.id in index:
                raise DuplicateNodeError(
                    f"Node id {node.id!r} appears more than once "
                    f"(positions {index[node.id]} and {ordinal})."
                )
            index[node.id] = ordinal

        member_list = tuple(_coerce_member(entry) for entry in members)
        for member in member_list:
            if not _known(index, member.start) or not _known(index, member.end):
                raise TopologyError(
                    f"All edges must reference valid nodes "
                    f"(edge {member.id!r}: {member.start!r} -> {member.end!r})."
                )

        return cls(nodes=node_list, members=member_list, index=index)

    @property
    def n_nodes(self) -> int:
        return len(self.nodes)

    @property
    def ndof(self) -> int:
        return 2 * len(self.nodes)

    @property
    def restraints(self) -> Tuple[Tuple[bool, bool], ...]:
        return tuple(node.fixed for node in self.nodes)

    def ordinal(self, node_id: NodeId) -> int:
        if not _known(self.index, node_id):
            raise TopologyError(f"Unknown node id {node_id!r}.")
        return self.index[node_id]

    def node(self, node_id: NodeId) -> Node:
        return self.nodes[self.ordinal(node_id)]

    def endpoints(self, member: Member) -> Tuple[Node, Node]:
        return self.node(member.start), self.node(member.end)


def _known(index: Mapping[NodeId, int], node_id: Optional[Any]) -> bool:
    # True/False would hash-alias node ids 1/0
    return _is_identifier(node_id) and node_id in index
