"""
Command line entry point.

    python -m electruss model.json
    python -m electruss model.json --plot artifacts/truss.png --csv artifacts/members.csv
"""

import argparse
import sys

from . import compute
from .errors import TrussError
from .io import load_document
from .post import equilibrium_residual, member_table, node_table, summarize
from .viz import plot_truss


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='electruss',
        description='Analyse a 2D truss document and report displacements, reactions and member forces',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m electruss bridge.json
  python -m electruss bridge.json --plot artifacts/bridge.png --csv artifacts/bridge_members.csv
        """
    )
    parser.add_argument('document', help='Truss document (JSON with "nodes" and "edges")')
    parser.add_argument('--plot', default=None, help='Write a deformed-shape plot to this path')
    parser.add_argument('--csv', default=None, help='Write the member force table to this CSV path')
    parser.add_argument('--scale', type=float, default=None,
                        help='Deformation scale for --plot (default: automatic)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        nodes, members = load_document(args.document)
        result = compute(nodes, members)
    except TrussError as e:
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"error: cannot read {args.document}: {e}", file=sys.stderr)
        return 1

    nodes_df = node_table(nodes, result)
    members_df = member_table(nodes, members, result)
    summary = summarize(result)
    sum_x, sum_y = equilibrium_residual(nodes, result)

    print("NODES")
    print(nodes_df[['node_id', 'dx', 'dy', 'rx', 'ry']].to_string(index=False))
    print("\nMEMBERS")
    print(members_df[['member_id', 'node_i', 'node_j', 'length', 'axial_force', 'force_type']]
          .to_string(index=False))
    print("\nSUMMARY")
    print(f"  Max displacement: {summary['max_displacement']:.6e} (node {summary['max_displacement_node']})")
    print(f"  Max tension:      {summary['max_tension']:.6g}")
    print(f"  Max compression:  {summary['max_compression']:.6g}")
    print(f"  Equilibrium:      ΣRx+ΣFx = {sum_x:.2e}, ΣRy+ΣFy = {sum_y:.2e}")

    if args.csv:
        members_df.to_csv(args.csv, index=False)
        print(f"\nMember table saved to: {args.csv}")
    if args.plot:
        plot_truss(nodes, members, result, args.plot, scale=args.scale)
        print(f"Plot saved to: {args.plot}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
