"""
Tests for the pyflange command-line interface.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from pyflange.calculator import DesignInput
from pyflange.cli import cli
from pyflange.config_schema import load_design, save_design


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def design_file(tmp_path: Path) -> Path:
    path = tmp_path / "design.yaml"
    save_design(DesignInput(), path)
    return path


class TestInit:
    def test_writes_default_design(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "new.yaml"
        result = runner.invoke(cli, ["init", "-o", str(path)])
        assert result.exit_code == 0
        assert load_design(path) == DesignInput()


class TestCalculate:
    """Test the calculate command."""

    def test_unsafe_design_exits_1(self, runner: CliRunner, design_file: Path):
        result = runner.invoke(cli, ["calculate", str(design_file)])
        assert result.exit_code == 1
        assert "NOT SAFE" in result.output
        assert "method 3" in result.output

    def test_safe_design(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "safe.yaml"
        save_design(DesignInput(bolt_count=24), path)
        result = runner.invoke(cli, ["calculate", str(path), "--force-unit", "kN"])
        assert result.exit_code == 0
        assert "Result: SAFE" in result.output
        assert "kN" in result.output

    def test_default_force_unit(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "psi.yaml"
        save_design(DesignInput(bolt_count=24, design_pressure=145.0, pressure_unit="PSI"), path)
        result = runner.invoke(cli, ["calculate", str(path)])
        assert "lbf" in result.output

    def test_pcc1_report(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "pcc1.yaml"
        save_design(DesignInput(bolt_count=24, use_pcc1_check=True, sg_t=207.0), path)
        result = runner.invoke(cli, ["calculate", str(path), "--pcc1-defaults"])
        assert "PCC-1:" in result.output
        assert "Sb_sel" in result.output
        assert "A / B / C" in result.output

    def test_bad_config(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("design:\n  flange_rating: 300\n", encoding="utf-8")
        result = runner.invoke(cli, ["calculate", str(path)])
        assert result.exit_code == 1
        assert "Error loading config" in result.output


class TestOptimize:
    """Test the optimize command."""

    def test_writes_best_design(self, runner: CliRunner, design_file: Path, tmp_path: Path):
        out = tmp_path / "best.yaml"
        result = runner.invoke(cli, ["optimize", str(design_file), "-o", str(out)])
        assert result.exit_code == 0
        best = load_design(out)
        assert (best.bolt_size, best.bolt_count) == (0.75, 24)

    def test_prints_design(self, runner: CliRunner, design_file: Path):
        result = runner.invoke(cli, ["optimize", str(design_file), "--fixed-size"])
        assert result.exit_code == 0
        assert "bolt_count: 24" in result.output

    def test_nothing_found_exits_1(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "hopeless.yaml"
        save_design(DesignInput(design_pressure=1000.0), path)
        result = runner.invoke(cli, ["optimize", str(path), "--fixed-size"])
        assert result.exit_code == 1
        assert "No feasible bolting" in result.output


class TestTables:
    """Test the tables command."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("bolts", '3/4"'),
            ("materials", "SA-193 B7"),
            ("gaskets", "Spiral-wound"),
            ("rings", "1500"),
            ("pcc1", "kammprofile"),
        ],
    )
    def test_lists_table(self, runner: CliRunner, name: str, expected: str):
        result = runner.invoke(cli, ["tables", name])
        assert result.exit_code == 0
        assert expected in result.output

    def test_bolt_columns(self, runner: CliRunner):
        result = runner.invoke(cli, ["tables", "bolts"])
        row = next(line for line in result.output.splitlines() if line.strip().startswith('3/4"'))
        assert "19.05" in row
        assert "1.875" in row
        half = next(line for line in result.output.splitlines() if line.strip().startswith('1/2"'))
        assert " - " in half

    def test_export(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "tables.yaml"
        result = runner.invoke(cli, ["tables", "rings", "--export", str(out)])
        assert result.exit_code == 0
        assert out.exists()

    def test_unknown_table(self, runner: CliRunner):
        result = runner.invoke(cli, ["tables", "flanges"])
        assert result.exit_code != 0
