from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import cast

import yaml  # type: ignore[import-untyped]

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "defaults.yaml"
_SUPPORTED_SCHEMA_VERSION = 1


class SolverConfigError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class ResidualThresholds:
    epsilon: float
    pass_max: float
    degraded_max: float


@dataclass(frozen=True, slots=True)
class RenderSettings:
    float_precision: int | None


@dataclass(frozen=True, slots=True)
class SolverSettings:
    zero_tolerance: float
    residual: ResidualThresholds
    rendering: RenderSettings
    artifact_path: str


def load_solver_settings(path: str | Path | None = None) -> SolverSettings:
    selected_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    return _load_solver_settings_cached(str(selected_path.resolve()))


@cache
def _load_solver_settings_cached(path: str) -> SolverSettings:
    target = Path(path)
    raw = _read_yaml_file(target)
    schema_version = raw.get("schema_version")
    if schema_version != _SUPPORTED_SCHEMA_VERSION:
        raise SolverConfigError(
            "E_SOLVER_CONFIG_INVALID",
            f"unsupported settings schema_version: {schema_version!r}",
        )

    solver_block = _require_mapping(raw, "solver")
    zero_tolerance = _require_float(solver_block, "zero_tolerance")
    if zero_tolerance < 0.0:
        raise SolverConfigError("E_SOLVER_CONFIG_INVALID", "zero_tolerance must be >= 0")

    residual_block = _require_mapping(raw, "residual")
    residual_bands = _require_mapping(residual_block, "status_bands")
    residual = ResidualThresholds(
        epsilon=_require_float(residual_block, "relative_epsilon"),
        pass_max=_require_float(residual_bands, "pass_max"),
        degraded_max=_require_float(residual_bands, "degraded_max"),
    )
    _validate_residual_thresholds(residual)

    rendering_block = _require_mapping(raw, "rendering")
    return SolverSettings(
        zero_tolerance=zero_tolerance,
        residual=residual,
        rendering=RenderSettings(
            float_precision=_require_optional_precision(rendering_block, "float_precision"),
        ),
        artifact_path=str(target),
    )


def _validate_residual_thresholds(residual: ResidualThresholds) -> None:
    if residual.epsilon <= 0.0:
        raise SolverConfigError("E_SOLVER_CONFIG_INVALID", "relative_epsilon must be > 0")
    if not 0.0 <= residual.pass_max <= residual.degraded_max:
        raise SolverConfigError(
            "E_SOLVER_CONFIG_INVALID",
            "status bands must satisfy 0 <= pass_max <= degraded_max",
        )


def _read_yaml_file(path: Path) -> dict[str, object]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SolverConfigError(
            "E_SOLVER_CONFIG_READ_FAILED",
            f"unable to read solver settings artifact '{path}': {exc}",
        ) from exc
    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise SolverConfigError(
            "E_SOLVER_CONFIG_PARSE_FAILED",
            f"invalid solver settings yaml in '{path}': {exc}",
        ) from exc
    if not isinstance(payload, dict):
        raise SolverConfigError(
            "E_SOLVER_CONFIG_INVALID",
            "solver settings artifact root must be a mapping",
        )
    return cast(dict[str, object], payload)


def _require_mapping(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return cast(dict[str, object], value)
    raise SolverConfigError(
        "E_SOLVER_CONFIG_INVALID", f"missing or invalid mapping for key '{key}'"
    )


def _require_float(data: dict[str, object], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool):
        raise SolverConfigError("E_SOLVER_CONFIG_INVALID", f"invalid numeric value for key '{key}'")
    if isinstance(value, int | float):
        numeric = float(value)
        if math.isfinite(numeric):
            return numeric
    raise SolverConfigError("E_SOLVER_CONFIG_INVALID", f"missing or invalid float for key '{key}'")


def _require_optional_precision(data: dict[str, object], key: str) -> int | None:
    if key not in data:
        raise SolverConfigError("E_SOLVER_CONFIG_INVALID", f"missing key '{key}'")
    value = data[key]
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    raise SolverConfigError(
        "E_SOLVER_CONFIG_INVALID", f"'{key}' must be null or a non-negative integer"
    )
