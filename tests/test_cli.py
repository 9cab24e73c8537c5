"""CLI tests: run from a parameter file, interactive entry, output file, version."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from sdopt import __version__
from sdopt.cli import app, read_config_fn

runner = CliRunner()


class TestRunCommand:
    def test_config_file_to_console(self, write_config, quadratic_config):
        path = write_config(quadratic_config)
        result = runner.invoke(app, ["run", "--config", str(path)])
        assert result.exit_code == 0, result.output
        assert "Objective Function: Quadratic" in result.output
        assert "Objective Function Value: 32.00000" in result.output
        assert "Convergence reached after" in result.output
        assert result.output.rstrip().endswith("Optimization process completed.")

    def test_config_file_to_output_file(self, write_config, quadratic_config, tmp_path: Path):
        path = write_config(quadratic_config)
        out = tmp_path / "report.txt"
        result = runner.invoke(app, ["run", "-c", str(path), "-o", str(out)])
        assert result.exit_code == 0, result.output
        report = out.read_text()
        assert report.startswith("Objective Function: Quadratic\n")
        assert "Iteration 1:" not in result.output
        assert str(out) in result.output

    def test_interactive_entry(self):
        answers = "rosenbrock\n2\n3\n0.0001\n0.001\n-1.2 1.0\n"
        result = runner.invoke(app, ["run"], input=answers)
        assert result.exit_code == 0, result.output
        assert "Enter the choice of objective function" in result.output
        assert "Enter the initial point as 2 space-separated values:" in result.output
        assert "Objective Function: Rosenbrock" in result.output
        assert "Maximum iterations reached without satisfying the tolerance." in result.output

    def test_unknown_function_exits_before_running(self, write_config):
        path = write_config("sphere\n2\n10\n0.1\n0.1\n1 1\n")
        result = runner.invoke(app, ["run", "--config", str(path)])
        assert result.exit_code == 1
        assert "Error: Unknown objective function." in result.output
        assert "Iteration 1:" not in result.output

    def test_missing_config_file(self, tmp_path: Path):
        result = runner.invoke(app, ["run", "--config", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "Error reading the file." in result.output

    def test_unwritable_output(self, write_config, quadratic_config, tmp_path: Path):
        path = write_config(quadratic_config)
        out = tmp_path / "missing-dir" / "report.txt"
        result = runner.invoke(app, ["run", "-c", str(path), "-o", str(out)])
        assert result.exit_code == 1
        assert "Error reading the file." in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_read_config_fn_from_file(write_config, quadratic_config):
    cfg = read_config_fn(write_config(quadratic_config))
    assert cfg.function_name == "Quadratic"
