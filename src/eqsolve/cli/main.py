from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Literal

import numpy as np
import typer
from numpy.typing import NDArray

from eqsolve.diagnostics import (
    CLI_EQUATION_INVALID,
    DiagnosticEvent,
    build_diagnostic_event,
    sort_diagnostics,
)
from eqsolve.parser import ParseError, parse_equation
from eqsolve.polynomial import Polynomial, PolynomialError
from eqsolve.session import MatrixSolver, SessionResult
from eqsolve.solver import (
    Equation,
    SolverConfigError,
    SolverSettings,
    SolveStatus,
    format_scalar,
    load_solver_settings,
)

app = typer.Typer(help="Dense linear equation solver CLI")

_SOLVE_OUTPUT_SCHEMA_ID: Final[str] = "eqsolve_solve_output_v1"
_SOLVE_OUTPUT_SCHEMA_VERSION: Final[int] = 1
_EQUATION_OPTION = typer.Option(
    None,
    "--equation",
    "-e",
    help="Repeatable equation 'c0,c1,...=result', one per unknown, in order",
)
_SETTINGS_OPTION = typer.Option(
    None,
    "--settings",
    help="Path to a solver settings YAML artifact",
)


@app.command()
def solve(
    equation: list[str] | None = _EQUATION_OPTION,
    size: int | None = typer.Option(
        None,
        "--size",
        "-n",
        help="Declared number of unknowns (defaults to the number of equations)",
    ),
    format: Literal["text", "json"] = typer.Option(
        "text",
        "--format",
        help="Solve output format: text|json",
        show_default=True,
    ),
    settings_path: Path | None = _SETTINGS_OPTION,
) -> None:
    """Solve a square system of linear equations."""
    settings = _resolve_settings(settings_path)
    raw_equations = tuple(equation or ())
    parsed, parse_diagnostics = _parse_equations(raw_equations)
    if parse_diagnostics:
        _emit_failure(parse_diagnostics, output_format=format, size=size)
        raise typer.Exit(code=2)

    declared_size = size if size is not None else len(parsed)
    session = MatrixSolver(declared_size, settings=settings)
    for item in parsed:
        session.add_eq(item.coefficients, item.result)
    original = session.matrix
    result = session.solve()

    if format == "json":
        typer.echo(_build_solve_json_output(size=declared_size, result=result))
    else:
        precision = settings.rendering.float_precision
        typer.echo("Matrix:")
        typer.echo(original.render(precision), nl=False)
        if result.solution is not None:
            typer.echo("Solved:")
            typer.echo(session.matrix.render(precision), nl=False)
            _print_solution(result.solution, precision)
        if result.residual is not None:
            typer.echo(f"RESIDUAL status={result.status} res_rel={result.residual.res_rel:.3e}")
        _print_diagnostics(result.diagnostics)
    raise typer.Exit(code=_derive_solve_exit_code(result.status))


@app.command("eval")
def evaluate(
    coefficients: list[str] = typer.Argument(
        ...,
        help="Polynomial coefficients, highest degree first (use -- before negative values)",
    ),
    at: float = typer.Option(..., "--at", help="Point at which to evaluate the polynomial"),
) -> None:
    """Evaluate a polynomial with Horner's method."""
    try:
        poly = Polynomial.build(coefficients)
        value = poly.eval(at)
    except PolynomialError as exc:
        _print_diagnostics(
            (
                build_diagnostic_event(
                    exc.code.value,
                    exc.message,
                    element_id="cli.eval",
                    witness={"input": exc.input_text},
                ),
            )
        )
        raise typer.Exit(code=2) from exc
    typer.echo(f"p({format_scalar(at)}) = {format_scalar(value)}")


def _resolve_settings(settings_path: Path | None) -> SolverSettings:
    try:
        return load_solver_settings(settings_path)
    except SolverConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--settings") from exc


def _parse_equations(
    raw_equations: Sequence[str],
) -> tuple[tuple[Equation, ...], tuple[DiagnosticEvent, ...]]:
    parsed: list[Equation] = []
    diagnostics: list[DiagnosticEvent] = []
    for index, raw in enumerate(raw_equations):
        try:
            parsed.append(parse_equation(raw))
        except ParseError as exc:
            diagnostics.append(
                build_diagnostic_event(
                    CLI_EQUATION_INVALID,
                    exc.detail.message,
                    element_id="cli.solve",
                    row=index,
                    witness={"input": raw, "parse_code": exc.detail.code.value},
                )
            )
    return (tuple(parsed), sort_diagnostics(diagnostics))


def _emit_failure(
    diagnostics: Sequence[DiagnosticEvent],
    *,
    output_format: Literal["text", "json"],
    size: int | None,
) -> None:
    if output_format == "json":
        typer.echo(
            _build_solve_json_output(
                size=size,
                result=SessionResult(
                    solution=None,
                    residual=None,
                    status="fail",
                    diagnostics=tuple(diagnostics),
                ),
            )
        )
        return
    _print_diagnostics(diagnostics)


def _build_solve_json_output(*, size: int | None, result: SessionResult) -> str:
    payload: dict[str, object] = {
        "schema": _SOLVE_OUTPUT_SCHEMA_ID,
        "schema_version": _SOLVE_OUTPUT_SCHEMA_VERSION,
        "size": size,
        "status": result.status,
        "exit_code": _derive_solve_exit_code(result.status),
        "solution": (
            None if result.solution is None else [float(value) for value in result.solution]
        ),
        "residual": (
            None
            if result.residual is None
            else {
                "res_l2": result.residual.res_l2,
                "res_linf": result.residual.res_linf,
                "res_rel": result.residual.res_rel,
            }
        ),
        "diagnostics": [
            event.model_dump(mode="json", exclude_none=True) for event in result.diagnostics
        ],
    }
    return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def _print_solution(solution: NDArray[np.float64], precision: int | None) -> None:
    for index, value in enumerate(solution):
        typer.echo(f"x{index} = {format_scalar(value, precision)}")


def _print_diagnostics(diagnostics: Sequence[DiagnosticEvent]) -> None:
    for event in diagnostics:
        typer.echo(
            "DIAG"
            f" severity={event.severity}"
            f" stage={event.solver_stage}"
            f" code={event.code}"
            f" message={event.message}"
        )


def _derive_solve_exit_code(status: SolveStatus) -> int:
    if status == "fail":
        return 2
    if status == "degraded":
        return 1
    return 0


def main() -> None:
    app()


if __name__ == "__main__":
    main()
