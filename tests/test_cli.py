"""
Tests for the command-line interface.
"""

import json

import pytest

from tirerec.cli.main import cli, create_parser
from tirerec.cli.readable_output import print_readable_output


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "rider.json"
    assert cli(["make-example", "--output", str(path)]) == 0
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_allow_interval(self):
        args = create_parser().parse_args(["wind", "--from", "270", "--speed", "12", "--allow", "300:30"])
        assert args.allow == [(300.0, 30.0)]

    def test_bad_interval(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["wind", "--allow", "north"])


class TestCommands:
    """Tests for CLI subcommands."""

    def test_make_example(self, example_file):
        data = json.loads(example_file.read_text())
        assert data["system_weight"] == 180
        assert "preset" not in data

    def test_make_example_preset(self, tmp_path):
        path = tmp_path / "gravel.json"
        assert cli(["make-example", "--output", str(path), "--preset", "Gravel"]) == 0
        data = json.loads(path.read_text())
        assert data["preset"] == "Gravel"
        assert data["tire_width_mm"] == 40

    def test_pressure(self, example_file, capsys):
        capsys.readouterr()
        assert cli(["pressure", "--input", str(example_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["front"]["psi"] == 62
        assert data["rear"]["psi"] == 67

    def test_pressure_to_file(self, example_file, tmp_path):
        out = tmp_path / "result.json"
        assert cli(["pressure", "--input", str(example_file), "--output", str(out)]) == 0
        assert json.loads(out.read_text())["rear"]["psi"] == 67

    def test_pressure_readable(self, example_file, capsys):
        capsys.readouterr()
        assert cli(["pressure", "--input", str(example_file), "--readable"]) == 0
        out = capsys.readouterr().out
        assert "Front" in out
        assert "62 psi" in out

    def test_pressure_missing_file(self, tmp_path):
        assert cli(["pressure", "--input", str(tmp_path / "missing.json")]) == 1

    def test_pressure_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert cli(["pressure", "--input", str(path)]) == 1

    def test_compensate(self, example_file, capsys):
        capsys.readouterr()
        assert cli(["compensate", "--input", str(example_file), "--temp", "5", "--elevation", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["available"] is True
        assert data["front_psi"] == pytest.approx(58.1)

    def test_compensate_elevation_beyond_model(self, example_file, capsys):
        capsys.readouterr()
        assert cli(["compensate", "--input", str(example_file), "--temp", "5", "--elevation", "50000"]) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)["available"] is False
        assert "outside the supported range" in captured.err

    def test_compensate_needs_location(self, example_file):
        assert cli(["compensate", "--input", str(example_file)]) == 1

    def test_wind(self, capsys):
        assert cli(["wind", "--from", "270", "--speed", "12", "--heading", "0"]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["candidates"][0]["heading_deg"] == 90
        assert "from the left" in captured.err

    def test_wind_needs_observation(self):
        assert cli(["wind"]) == 1

    def test_readable_output_from_file(self, tmp_path, capsys):
        out = tmp_path / "wind.json"
        assert cli(["wind", "--from", "90", "--speed", "10", "--output", str(out)]) == 0
        capsys.readouterr()
        print_readable_output(out)
        text = capsys.readouterr().out
        assert "Best direction to ride" in text
        assert "(E)" in text

    def test_no_command(self, capsys):
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
