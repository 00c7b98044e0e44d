"""Tests for the command line front end."""
import pytest

from trifab import cli


def test_saves_figure(fabric_file, tmp_path, capsys):
    out = tmp_path / "plot.png"
    rc = cli.main([str(fabric_file), "--nodes", "20", "--save", str(out)])
    assert rc == 0
    assert out.exists()
    summary = capsys.readouterr().out
    assert "Records: 4" in summary
    assert "grid 20x20" in summary


def test_expected_mode_uses_first_record(fabric_file, tmp_path, capsys):
    out = tmp_path / "plot.png"
    rc = cli.main([str(fabric_file), "--nodes", "15", "--mode", "3", "--save", str(out), "--colorbar"])
    assert rc == 0
    assert "expected intensity" in capsys.readouterr().out


def test_explicit_expected(fabric_file, tmp_path):
    out = tmp_path / "plot.png"
    rc = cli.main([str(fabric_file), "--nodes", "15", "--mode", "2",
                   "--expected", "0.4", "0.35", "0.25", "--save", str(out)])
    assert rc == 0


def test_no_records(tmp_path, capsys):
    path = tmp_path / "empty.csv"
    path.write_text("# header only\n", encoding="utf-8")
    assert cli.main([str(path)]) == 1
    assert "No valid fabric records" in capsys.readouterr().out


@pytest.mark.parametrize("extra", [["--nodes", "1"], ["--err", "-0.01"]])
def test_bad_grid_options_are_usage_errors(fabric_file, capsys, extra):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(fabric_file), *extra])
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err
