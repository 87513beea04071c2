from __future__ import annotations

from pathlib import Path

import pytest

from eqsolve.solver import (
    DEFAULT_SETTINGS_PATH,
    SolverConfigError,
    load_solver_settings,
)

pytestmark = pytest.mark.unit

_VALID_ARTIFACT = """\
schema_version: 1
solver:
  zero_tolerance: 1.0e-12
residual:
  relative_epsilon: 1.0e-30
  status_bands:
    pass_max: 1.0e-8
    degraded_max: 1.0e-5
rendering:
  float_precision: 3
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_default_artifact_values() -> None:
    settings = load_solver_settings()

    assert settings.zero_tolerance == 0.0
    assert settings.residual.epsilon == 1.0e-30
    assert settings.residual.pass_max == 1.0e-9
    assert settings.residual.degraded_max == 1.0e-6
    assert settings.rendering.float_precision is None
    assert Path(settings.artifact_path) == DEFAULT_SETTINGS_PATH.resolve()


def test_loading_is_cached_per_path() -> None:
    assert load_solver_settings() is load_solver_settings()
    assert load_solver_settings(DEFAULT_SETTINGS_PATH) is load_solver_settings()


def test_custom_artifact(tmp_path: Path) -> None:
    settings = load_solver_settings(_write(tmp_path, _VALID_ARTIFACT))

    assert settings.zero_tolerance == 1.0e-12
    assert settings.residual.pass_max == 1.0e-8
    assert settings.residual.degraded_max == 1.0e-5
    assert settings.rendering.float_precision == 3


def test_missing_artifact(tmp_path: Path) -> None:
    with pytest.raises(SolverConfigError) as exc_info:
        load_solver_settings(tmp_path / "absent.yaml")
    assert exc_info.value.code == "E_SOLVER_CONFIG_READ_FAILED"


def test_malformed_yaml(tmp_path: Path) -> None:
    with pytest.raises(SolverConfigError) as exc_info:
        load_solver_settings(_write(tmp_path, "solver: [\n"))
    assert exc_info.value.code == "E_SOLVER_CONFIG_PARSE_FAILED"


@pytest.mark.parametrize(
    ("original", "replacement"),
    [
        ("schema_version: 1", "schema_version: 2"),
        ("zero_tolerance: 1.0e-12", "zero_tolerance: -1.0"),
        ("zero_tolerance: 1.0e-12", "zero_tolerance: true"),
        ("zero_tolerance: 1.0e-12", "zero_tolerance: .nan"),
        ("pass_max: 1.0e-8", "pass_max: 1.0e-3"),
        ("relative_epsilon: 1.0e-30", "relative_epsilon: 0.0"),
        ("float_precision: 3", "float_precision: -1"),
        ("float_precision: 3", "float_precision: two"),
    ],
)
def test_invalid_values(tmp_path: Path, original: str, replacement: str) -> None:
    text = _VALID_ARTIFACT.replace(original, replacement)
    assert text != _VALID_ARTIFACT

    with pytest.raises(SolverConfigError) as exc_info:
        load_solver_settings(_write(tmp_path, text))
    assert exc_info.value.code == "E_SOLVER_CONFIG_INVALID"


def test_root_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(SolverConfigError) as exc_info:
        load_solver_settings(_write(tmp_path, "- 1\n- 2\n"))
    assert exc_info.value.code == "E_SOLVER_CONFIG_INVALID"


def test_missing_block(tmp_path: Path) -> None:
    text = _VALID_ARTIFACT.split("rendering:")[0]
    with pytest.raises(SolverConfigError, match="rendering"):
        load_solver_settings(_write(tmp_path, text))
