import json

import pytest

from electruss import compute
from electruss.__main__ import main
from electruss.io import save_document
from electruss.viz import auto_scale, plot_truss


def test_plot_truss_writes_file(tmp_path, warren):
    nodes, members = warren
    result = compute(nodes, members)
    outpath = str(tmp_path / "plots" / "warren.png")

    returned = plot_truss(nodes, members, result, outpath)

    assert returned == outpath
    assert (tmp_path / "plots" / "warren.png").stat().st_size > 0


def test_auto_scale(triangle):
    nodes, members = triangle
    result = compute(nodes, members)

    scale = auto_scale(nodes, result, ratio=0.1)

    # model size is 4 (span), so the largest displacement is drawn as 0.4
    assert scale * result.max_displacement == pytest.approx(0.4)


def test_cli_report_and_exports(tmp_path, triangle, capsys):
    nodes, members = triangle
    doc = save_document(tmp_path / "triangle.json", nodes, members)
    csv_path = tmp_path / "members.csv"
    png_path = tmp_path / "triangle.png"

    status = main([str(doc), '--csv', str(csv_path), '--plot', str(png_path), '--scale', '100'])

    assert status == 0
    out = capsys.readouterr().out
    assert 'MEMBERS' in out
    assert 'Max tension' in out
    assert csv_path.read_text().startswith('member_id,')
    assert png_path.exists()


def test_cli_reports_engine_errors(tmp_path, capsys):
    from electruss import Member, Node

    nodes = [Node(1, 0.0, 0.0, fixed=(False, False)), Node(2, 1.0, 0.0, fixed=(False, False))]
    members = [Member('e', 1, 2, area=1.0, elastic_modulus=1.0)]
    doc = save_document(tmp_path / "unstable.json", nodes, members)

    status = main([str(doc)])

    assert status == 1
    assert 'singularity' in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert 'cannot read' in capsys.readouterr().err


def test_cli_rejects_out_of_range_coordinate(tmp_path, capsys):
    document = {
        'nodes': [
            {'id': 1, 'x': 10 ** 400, 'y': 0, 'fixed': {'x': True, 'y': True}},
            {'id': 2, 'x': 1, 'y': 0, 'fixed': {'x': False, 'y': True}},
        ],
        'edges': [{'id': 'e', 'from': 1, 'to': 2, 'area': 1.0, 'elastic_modulus': 1.0}],
    }
    path = tmp_path / "huge.json"
    path.write_text(json.dumps(document))

    assert main([str(path)]) == 1
    assert 'numeric_validity' in capsys.readouterr().err
