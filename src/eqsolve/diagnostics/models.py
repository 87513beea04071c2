from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class SolverStage(StrEnum):
    PARSE = "parse"
    VALIDATE = "validate"
    SOLVE = "solve"
    POSTPROCESS = "postprocess"


class DiagnosticEvent(BaseModel):
    """A single reportable outcome of parsing, solving or checking a system.

    ``element_id`` names what was being processed (``matrix``, ``cli.solve``);
    ``row`` is set when the outcome belongs to one equation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(min_length=1)
    severity: Severity
    solver_stage: SolverStage
    message: str = Field(min_length=1)
    suggested_action: str = Field(min_length=1)
    element_id: str = Field(min_length=1)
    row: int | None = Field(default=None, ge=0)
    witness: dict[str, str | int | float | None] = Field(default_factory=dict)

    @field_validator("witness")
    @classmethod
    def _sort_witness(
        cls, witness: dict[str, str | int | float | None]
    ) -> dict[str, str | int | float | None]:
        return dict(sorted(witness.items()))
