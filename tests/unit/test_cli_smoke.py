from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eqsolve.cli.main import app

pytestmark = pytest.mark.unit

runner = CliRunner()


def test_cli_help_smoke() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "solve" in result.stdout
    assert "eval" in result.stdout


def test_solve_text_output() -> None:
    result = runner.invoke(app, ["solve", "-e", "8,-6=2", "-e", "2,3=2"])

    assert result.exit_code == 0
    assert "Matrix:\n[8.0, -6.0] = 2.0\n[2.0, 3.0] = 2.0\n" in result.stdout
    assert "Solved:\n[1.0, 0.0] = 0.5\n" in result.stdout
    assert "x0 = 0.5" in result.stdout
    assert "x1 = 0.3333333333333333" in result.stdout
    assert "RESIDUAL status=pass" in result.stdout


def test_solve_json_output() -> None:
    result = runner.invoke(
        app, ["solve", "--equation", "8,-6=2", "--equation", "2,3=2", "--format", "json"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["schema"] == "eqsolve_solve_output_v1"
    assert payload["size"] == 2
    assert payload["status"] == "pass"
    assert payload["exit_code"] == 0
    assert payload["solution"] == pytest.approx([0.5, 1.0 / 3.0])
    assert payload["diagnostics"] == []


def test_declared_size_mismatch_fails() -> None:
    result = runner.invoke(app, ["solve", "--size", "2", "-e", "8,-6=2"])

    assert result.exit_code == 2
    assert "Solved:" not in result.stdout
    assert "code=E_MATRIX_EQUATION_AMOUNT" in result.stdout


def test_dependent_system_fails() -> None:
    result = runner.invoke(app, ["solve", "-e", "1,2=3", "-e", "2,4=6", "--format", "json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    assert payload["status"] == "fail"
    assert payload["solution"] is None
    assert [event["code"] for event in payload["diagnostics"]] == ["E_SOLVE_DEPENDENT"]


def test_invalid_equation_text_is_reported_per_row() -> None:
    result = runner.invoke(app, ["solve", "-e", "8,x=2", "-e", "2,3"])

    assert result.exit_code == 2
    assert result.stdout.count("code=E_CLI_EQUATION_INVALID") == 2


def test_no_equations_is_too_small() -> None:
    result = runner.invoke(app, ["solve"])
    assert result.exit_code == 2
    assert "code=E_MATRIX_TOO_SMALL" in result.stdout


def test_settings_artifact_controls_rendering(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "schema_version: 1\n"
        "solver:\n  zero_tolerance: 0.0\n"
        "residual:\n  relative_epsilon: 1.0e-30\n"
        "  status_bands:\n    pass_max: 1.0e-9\n    degraded_max: 1.0e-6\n"
        "rendering:\n  float_precision: 2\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app, ["solve", "-e", "8,-6=2", "-e", "2,3=2", "--settings", str(settings_path)]
    )

    assert result.exit_code == 0
    assert "x1 = 0.33" in result.stdout
    assert "[8.00, -6.00] = 2.00" in result.stdout


def test_unreadable_settings_artifact_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["solve", "-e", "1=1", "--settings", str(tmp_path / "missing.yaml")]
    )
    assert result.exit_code == 2


def test_eval_polynomial() -> None:
    result = runner.invoke(app, ["eval", "1", "2", "3", "--at", "2"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "p(2.0) = 11.0"


def test_eval_rejects_invalid_coefficient() -> None:
    result = runner.invoke(app, ["eval", "1", "x", "--at", "2"])

    assert result.exit_code == 2
    assert "code=E_POLY_BUILD_INVALID" in result.stdout


def test_unknown_format_is_a_usage_error() -> None:
    result = runner.invoke(app, ["solve", "-e", "1=1", "--format", "xml"])
    assert result.exit_code == 2


def test_invalid_equation_json_carries_row_and_parse_code() -> None:
    result = runner.invoke(app, ["solve", "-e", "1,2=3", "-e", "1,q=3", "--format", "json"])

    assert result.exit_code == 2
    payload = json.loads(result.stdout)
    (event,) = payload["diagnostics"]
    assert event["code"] == "E_CLI_EQUATION_INVALID"
    assert event["row"] == 1
    assert event["witness"] == {"input": "1,q=3", "parse_code": "E_PARSE_EQUATION_INVALID"}
