import numpy as np
import pytest

from coordshape.presentation.cli.analyze_shape import main, setup_parser

from conftest import OCTAHEDRON


def pdb_line(serial, name, element, position):
    x, y, z = position
    return (
        f"HETATM{serial:5d} {name:<4} MOL A   1    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{1.0:6.2f}{0.0:6.2f}          {element:>2}"
    )


@pytest.fixture
def octahedral_pdb(tmp_path):
    lines = [pdb_line(1, "CO", "CO", (0.0, 0.0, 0.0))]
    for serial, point in enumerate(2.0 * OCTAHEDRON, start=2):
        lines.append(pdb_line(serial, f"O{serial - 1}", "O", point))
    # Distant solvent atom outside the coordination sphere
    lines.append(pdb_line(8, "OW", "O", (6.0, 0.0, 0.0)))
    lines.append("END")
    path = tmp_path / "complex.pdb"
    path.write_text("\n".join(lines) + "\n")
    return path


def test_parser_defaults():
    args = setup_parser().parse_args(["complex.pdb", "--metal-index", "3"])
    assert args.metal_index == 3
    assert args.radius == 3.0
    assert args.mode == "default"
    assert args.seed is None
    assert args.workers == 1


def test_parser_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        setup_parser().parse_args(["complex.pdb", "--metal-index", "0", "--mode", "huge"])


def test_report_for_octahedral_complex(octahedral_pdb, capsys):
    main([str(octahedral_pdb), "--metal-index", "0", "--mode", "fast", "--seed", "1"])

    output = capsys.readouterr().out
    assert "Metal: Co (atom 0)" in output
    assert "Pattern: general (CN=6" in output
    ranked = [line for line in output.splitlines() if line.startswith("1 ")]
    assert "Octahedral" in ranked[0]
    assert float(ranked[0].split()[-1]) == pytest.approx(0.0, abs=1e-4)
    assert "Quality: score" in output
    assert "Bond lengths: mean 2.000 A" in output
    assert "Angles: 15 pairs" in output


def test_metal_index_out_of_range_exits(octahedral_pdb):
    with pytest.raises(SystemExit) as excinfo:
        main([str(octahedral_pdb), "--metal-index", "42", "--mode", "fast"])
    assert excinfo.value.code == 1


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.pdb"), "--metal-index", "0"])
    assert excinfo.value.code == 1


def test_pdb_reader_uses_element_column(octahedral_pdb):
    from coordshape.infrastructure.adapters.pdb_adapter import PDBAtomReader

    atoms = PDBAtomReader().read(str(octahedral_pdb))

    assert [atom.element for atom in atoms[:2]] == ["Co", "O"]
    assert len(atoms) == 8
    np.testing.assert_allclose(atoms[1].coordinates, [2.0, 0.0, 0.0], atol=1e-3)
