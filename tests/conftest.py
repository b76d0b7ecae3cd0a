import matplotlib
matplotlib.use("Agg")

import pytest

from electruss import Member, Node


def make_single_member(load_fx=1000.0, E=2e11, A=0.01, L=1.0):
    """
    One horizontal bar: 'a' pinned, 'b' on a roller (free in x), tip load.

        a o==========o b  --> F
          ^          o
    """
    nodes = [
        Node('a', 0.0, 0.0, fixed=(True, True)),
        Node('b', L, 0.0, fixed=(False, True), load=(load_fx, 0.0)),
    ]
    members = [Member('m1', 'a', 'b', area=A, elastic_modulus=E)]
    return nodes, members


def make_triangle(P=1000.0, E=200e9, A=0.001):
    """
    Symmetric triangle, span 4, rise 2, downward load P at the apex.

                C (2, 2)
               / \\
              /   \\
     (0, 0) A ----- B (4, 0)
            pin     roller

    Statics: AB = +P/2 (tension), AC = BC = -P/√2 (compression),
    vertical reactions P/2 at A and B.
    """
    nodes = [
        Node('A', 0.0, 0.0, fixed=(True, True)),
        Node('B', 4.0, 0.0, fixed=(False, True)),
        Node('C', 2.0, 2.0, fixed=(False, False), load=(0.0, -P)),
    ]
    members = [
        Member('AB', 'A', 'B', area=A, elastic_modulus=E),
        Member('AC', 'A', 'C', area=A, elastic_modulus=E),
        Member('BC', 'B', 'C', area=A, elastic_modulus=E),
    ]
    return nodes, members


def make_warren_truss(n_panels=4, panel=3.0, height=2.5, P=10000.0, E=210e9, A=0.002):
    """
    Warren truss with integer node ids: bottom chord 0..n, top chord n+1..2n.
    Pinned at node 0, roller at node n, load -P at interior bottom nodes.
    """
    nodes = []
    for i in range(n_panels + 1):
        fixed = (True, True) if i == 0 else (False, True) if i == n_panels else (False, False)
        load = (0.0, -P) if 0 < i < n_panels else (0.0, 0.0)
        nodes.append(Node(i, i * panel, 0.0, fixed=fixed, load=load))
    top = []
    for i in range(n_panels):
        node_id = n_panels + 1 + i
        top.append(node_id)
        nodes.append(Node(node_id, (i + 0.5) * panel, height, fixed=(False, False)))

    members = []
    for i in range(n_panels):
        members.append(Member(f"b{i}", i, i + 1, area=A, elastic_modulus=E))
        members.append(Member(f"d{2 * i}", i, top[i], area=A, elastic_modulus=E))
        members.append(Member(f"d{2 * i + 1}", top[i], i + 1, area=A, elastic_modulus=E))
    for i in range(n_panels - 1):
        members.append(Member(f"t{i}", top[i], top[i + 1], area=A, elastic_modulus=E))
    return nodes, members


@pytest.fixture
def single_member():
    return make_single_member()


@pytest.fixture
def triangle():
    return make_triangle()


@pytest.fixture
def warren():
    return make_warren_truss()
