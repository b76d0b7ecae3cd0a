#!/usr/bin/env python3
"""
RUN_SINGLE_MEMBER: The Smallest Truss Analysis
==============================================

One steel bar, pinned at the left, on a roller at the right, pulled along
its axis. The result can be checked by hand:

    δ = F·L / (A·E)      N = F      R = -F

Run with:
    python demos/run_single_member.py
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from electruss import Member, Node, compute


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    L = 1.0       # m
    A = 0.01      # m²
    E = 200e9     # Pa
    F = 1000.0    # N

    print_header("SINGLE MEMBER UNDER AXIAL LOAD")
    print(f"\n  L = {L} m, A = {A} m², E = {E:.1e} Pa, F = {F} N")

    nodes = [
        Node('a', 0.0, 0.0, fixed=(True, True)),
        Node('b', L, 0.0, fixed=(False, True), load=(F, 0.0)),
    ]
    members = [Member('m1', 'a', 'b', area=A, elastic_modulus=E)]

    result = compute(nodes, members)

    print_header("RESULTS")
    expected = F * L / (A * E)
    dx = result.displacements['b'].dx
    print(f"\n  Tip displacement: {dx:.6e} m   (hand calc: {expected:.6e} m)")
    print(f"  Member force:     {result.member_force('m1'):.3f} N   (hand calc: {F:.3f} N, tension)")
    print(f"  Reaction at a:    {result.reactions['a'].rx:.3f} N   (hand calc: {-F:.3f} N)")
    print(f"  Max displacement: {result.max_displacement:.6e} m")


if __name__ == "__main__":
    main()
