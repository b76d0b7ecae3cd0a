import math

import pytest

from electruss import (
    ConstraintShapeError,
    DegenerateMemberError,
    DuplicateNodeError,
    InputShapeError,
    KinematicError,
    MechanismError,
    Member,
    Node,
    NumericValidityError,
    TopologyError,
    TrussError,
    compute,
)


def node(node_id, x, y, fx=False, fy=False, load=None):
    payload = {'id': node_id, 'x': x, 'y': y, 'fixed': {'x': fx, 'y': fy}}
    if load is not None:
        payload['load'] = load
    return payload


def edge(edge_id, start, end, area=0.01, elastic_modulus=1e7):
    return {'id': edge_id, 'from': start, 'to': end, 'area': area, 'elastic_modulus': elastic_modulus}


class TestInputShape:

    @pytest.mark.parametrize('nodes, edges', [
        ('nodes', []),
        ([], 'edges'),
        ({'id': 1}, []),
        ({1, 2}, []),
        (None, None),
    ])
    def test_non_sequence_collections(self, nodes, edges):
        with pytest.raises(InputShapeError, match="must be arrays"):
            compute(nodes, edges)

    def test_entry_not_a_mapping(self):
        with pytest.raises(InputShapeError):
            compute([42], [])

    def test_node_without_id(self):
        with pytest.raises(InputShapeError, match="id"):
            compute([{'x': 0, 'y': 0, 'fixed': {'x': True, 'y': True}}], [])

    def test_bool_identifier_rejected(self):
        with pytest.raises(InputShapeError):
            Node(True, 0.0, 0.0, fixed=(True, True))


class TestNumericValidity:

    @pytest.mark.parametrize('x, y', [
        (math.nan, 0.0),
        (0.0, math.inf),
        (None, 0.0),
        ('1.0', 0.0),
    ])
    def test_bad_coordinates(self, x, y):
        with pytest.raises(NumericValidityError, match="coordinate must be finite"):
            compute([node(1, x, y, True, True)], [])

    def test_bad_load(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, load={'fx': math.inf})]
        with pytest.raises(NumericValidityError, match="fx must be finite"):
            compute(nodes, [edge('e', 1, 2)])

    @pytest.mark.parametrize('area, modulus, message', [
        (math.nan, 1e7, "area"),
        (0.01, -math.inf, "elastic modulus"),
        (None, 1e7, "area"),
    ])
    def test_bad_section(self, area, modulus, message):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, False, True, load={'fx': 1.0})]
        with pytest.raises(NumericValidityError, match=message):
            compute(nodes, [edge('e', 1, 2, area=area, elastic_modulus=modulus)])

    def test_integer_beyond_float_range(self):
        huge = 10 ** 400
        with pytest.raises(NumericValidityError, match="x coordinate"):
            compute([node(1, huge, 0, True, True)], [])

        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, False, True, load={'fy': -huge})]
        with pytest.raises(NumericValidityError, match="fy must be finite"):
            compute(nodes, [edge('e', 1, 2)])

        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, False, True)]
        with pytest.raises(NumericValidityError, match="area"):
            compute(nodes, [edge('e', 1, 2, area=huge)])

    def test_unknown_endpoint_with_bad_area(self):
        """Section properties are checked when the member is built, before endpoints resolve."""
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0)]
        with pytest.raises(NumericValidityError):
            compute(nodes, [edge('e', 1, 99, area=math.nan)])


class TestConstraintShape:

    @pytest.mark.parametrize('fixed', [
        None,
        {'x': True},
        {'x': 1, 'y': 0},
        (True,),
        'both',
    ])
    def test_malformed_fixed(self, fixed):
        payload = {'id': 1, 'x': 0.0, 'y': 0.0}
        if fixed is not None:
            payload['fixed'] = fixed
        with pytest.raises(ConstraintShapeError, match="fixed.x and fixed.y"):
            compute([payload], [])


class TestTopology:

    def test_unknown_node_reference(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0)]
        with pytest.raises(TopologyError, match="valid nodes"):
            compute(nodes, [edge('e', 1, 3)])

    def test_missing_reference(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0)]
        with pytest.raises(TopologyError):
            compute(nodes, [{'id': 'e', 'from': 1, 'area': 1.0, 'elastic_modulus': 1.0}])

    def test_string_and_int_ids_are_distinct(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0)]
        with pytest.raises(TopologyError):
            compute(nodes, [edge('e', '1', 2)])

    def test_duplicate_node_ids_rejected(self):
        nodes = [node(1, 0, 0, True, True), node(1, 1, 0)]
        with pytest.raises(DuplicateNodeError, match="more than once"):
            compute(nodes, [])


class TestDegeneracy:

    def test_coincident_nodes(self):
        """Zero-length member between coincident nodes."""
        nodes = [node(1, 0, 0, True, True), node(2, 0, 0, False, True, load={'fx': 5, 'fy': 0})]
        with pytest.raises(DegenerateMemberError, match="greater than zero"):
            compute(nodes, [edge('e', 1, 2)])

    def test_coincident_nodes_fully_restrained(self):
        """Degeneracy wins over the kinematic check: it is caught at assembly."""
        nodes = [node(1, 0, 0, True, True), node(2, 0, 0, True, True)]
        with pytest.raises(DegenerateMemberError):
            compute(nodes, [edge('e', 1, 2)])

    @pytest.mark.parametrize('length', [1e-9, 5e-10])
    def test_at_or_below_tolerance(self, length):
        nodes = [node(1, 0, 0, True, True), node(2, length, 0, False, True)]
        with pytest.raises(DegenerateMemberError):
            compute(nodes, [edge('e', 1, 2)])

    def test_just_above_tolerance_is_accepted(self):
        nodes = [node(1, 0, 0, True, True), node(2, 2e-9, 0, False, True, load={'fx': 1.0})]
        result = compute(nodes, [edge('e', 1, 2, area=1.0, elastic_modulus=1.0)])
        assert result.member_forces[0].axial_force == pytest.approx(1.0)

    def test_self_loop(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0)]
        with pytest.raises(DegenerateMemberError):
            compute(nodes, [edge('e', 2, 2)])


class TestKinematic:

    def test_all_dofs_restrained(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, True, True)]
        with pytest.raises(KinematicError, match="No free degrees of freedom"):
            compute(nodes, [edge('e', 1, 2)])

    def test_empty_model(self):
        with pytest.raises(KinematicError):
            compute([], [])


class TestSingularity:

    def test_unrestrained_bar(self):
        """Two free nodes joined by one bar: rigid-body motion."""
        nodes = [
            node(1, 0, 0),
            node(2, 1, 0, load={'fx': 10, 'fy': 0}),
        ]
        with pytest.raises(MechanismError, match="structure is unstable"):
            compute(nodes, [edge('e', 1, 2)])

    def test_square_without_diagonal(self):
        """A four-bar square racks sideways: a mechanism."""
        nodes = [
            node('a', 0, 0, True, True),
            node('b', 1, 0, False, True),
            node('c', 1, 1, load={'fx': 1.0}),
            node('d', 0, 1),
        ]
        edges = [edge('ab', 'a', 'b'), edge('bc', 'b', 'c'), edge('cd', 'c', 'd'), edge('da', 'd', 'a')]
        with pytest.raises(MechanismError):
            compute(nodes, edges)

    def test_free_node_without_members(self):
        nodes = [node(1, 0, 0, True, True), node(2, 1, 0, False, True), node(3, 5, 5)]
        with pytest.raises(MechanismError):
            compute(nodes, [edge('e', 1, 2)])

    def test_bracing_makes_square_stable(self):
        nodes = [
            Node('a', 0, 0, fixed=(True, True)),
            Node('b', 1, 0, fixed=(False, True)),
            Node('c', 1, 1, fixed=(False, False), load=(1.0, 0.0)),
            Node('d', 0, 1, fixed=(False, False)),
        ]
        members = [
            Member(mid, i, j, area=0.01, elastic_modulus=1e7)
            for mid, i, j in [('ab', 'a', 'b'), ('bc', 'b', 'c'), ('cd', 'c', 'd'),
                              ('da', 'd', 'a'), ('ac', 'a', 'c')]
        ]
        result = compute(nodes, members)
        assert result.max_displacement > 0.0


def test_error_kinds_and_builtin_bases():
    assert issubclass(InputShapeError, TypeError)
    for cls in (NumericValidityError, ConstraintShapeError, DuplicateNodeError,
                TopologyError, DegenerateMemberError):
        assert issubclass(cls, ValueError)
    for cls in (KinematicError, MechanismError):
        assert issubclass(cls, RuntimeError)

    kinds = {cls.kind for cls in (
        InputShapeError, NumericValidityError, ConstraintShapeError, DuplicateNodeError,
        TopologyError, DegenerateMemberError, KinematicError, MechanismError,
    )}
    assert len(kinds) == 8
    assert MechanismError.kind == 'singularity'
    assert all(issubclass(cls, TrussError) for cls in (InputShapeError, MechanismError))
