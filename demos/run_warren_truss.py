#!/usr/bin/env python3
"""
RUN_WARREN_TRUSS: A Simply Supported Warren Truss
=================================================

This demo shows the complete workflow:
1. Build a Warren truss (bottom chord, top chord, alternating diagonals)
2. Solve with compute()
3. Check global equilibrium
4. Tabulate member forces and save a plot and a document

Run with:
    python demos/run_warren_truss.py
    python demos/run_warren_truss.py --panels 6 --load 20000
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from electruss import Member, Node, compute
from electruss.io import save_document
from electruss.post import equilibrium_residual, member_table, summarize
from electruss.viz import plot_truss


def make_warren(n_panels: int, panel: float, height: float, P: float, E: float, A: float):
    """Bottom nodes 'B0'..'Bn', top nodes 'T0'..'T(n-1)'; pinned at B0, roller at Bn."""
    nodes = []
    for i in range(n_panels + 1):
        if i == 0:
            fixed = (True, True)
        elif i == n_panels:
            fixed = (False, True)
        else:
            fixed = (False, False)
        load = (0.0, -P) if 0 < i < n_panels else (0.0, 0.0)
        nodes.append(Node(f"B{i}", i * panel, 0.0, fixed=fixed, load=load))
    for i in range(n_panels):
        nodes.append(Node(f"T{i}", (i + 0.5) * panel, height, fixed=(False, False)))

    members = []
    for i in range(n_panels):
        members.append(Member(f"bottom{i}", f"B{i}", f"B{i + 1}", area=A, elastic_modulus=E))
        members.append(Member(f"up{i}", f"B{i}", f"T{i}", area=A, elastic_modulus=E))
        members.append(Member(f"down{i}", f"T{i}", f"B{i + 1}", area=A, elastic_modulus=E))
    for i in range(n_panels - 1):
        members.append(Member(f"top{i}", f"T{i}", f"T{i + 1}", area=A, elastic_modulus=E))
    return nodes, members


def main():
    parser = argparse.ArgumentParser(description='Analyse a simply supported Warren truss')
    parser.add_argument('--panels', type=int, default=4, help='Number of panels (default: 4)')
    parser.add_argument('--panel', type=float, default=3.0, help='Panel length in m (default: 3.0)')
    parser.add_argument('--height', type=float, default=2.5, help='Truss depth in m (default: 2.5)')
    parser.add_argument('--load', type=float, default=10000.0,
                        help='Load per interior bottom joint in N (default: 10000)')
    parser.add_argument('--out', default='artifacts', help='Output directory (default: artifacts)')
    args = parser.parse_args()

    print("=" * 60)
    print("  WARREN TRUSS ANALYSIS")
    print("=" * 60)

    nodes, members = make_warren(args.panels, args.panel, args.height, args.load, E=210e9, A=0.002)
    print(f"\n  {len(nodes)} nodes, {len(members)} members, {2 * len(nodes)} DOFs")

    result = compute(nodes, members)

    sum_x, sum_y = equilibrium_residual(nodes, result)
    print(f"\n  Equilibrium check: ΣRx+ΣFx = {sum_x:.2e} N, ΣRy+ΣFy = {sum_y:.2e} N")

    table = member_table(nodes, members, result)
    table['axial_force_kN'] = table['axial_force'] / 1000.0
    print("\n  Member forces:")
    print(table[['member_id', 'length', 'axial_force_kN', 'force_type']].to_string(index=False))

    summary = summarize(result)
    print(f"\n  Max tension:      {summary['max_tension'] / 1000:.2f} kN")
    print(f"  Max compression:  {summary['max_compression'] / 1000:.2f} kN")
    print(f"  Max displacement: {summary['max_displacement'] * 1000:.3f} mm "
          f"at {summary['max_displacement_node']}")

    os.makedirs(args.out, exist_ok=True)
    plot_path = plot_truss(nodes, members, result, os.path.join(args.out, 'warren_truss.png'),
                           title='Warren Truss: Deformed Shape and Axial Forces')
    doc_path = save_document(os.path.join(args.out, 'warren_truss.json'), nodes, members)
    print(f"\n  Plot saved to: {plot_path}")
    print(f"  Document saved to: {doc_path}")


if __name__ == "__main__":
    main()
