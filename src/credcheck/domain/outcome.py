"""ValidationOutcome — the result of one evaluation.

A tagged variant: ``Valid`` or ``Invalid(kind, fields)``. Callers branch on it
with ``match`` or on its truthiness; nothing is raised for bad input.

    match evaluate(creds, policy):
        case Valid():
            proceed()
        case Invalid(kind=kind, fields=fields):
            highlight(fields, describe(...))
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from credcheck.domain.types import ErrorKind
from credcheck.domain.types import Field as InputField


class Valid(BaseModel):
    """Every rule passed."""

    model_config = {"frozen": True}

    status: Literal["valid"] = "valid"

    @property
    def ok(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


class Invalid(BaseModel):
    """The first rule that failed, and the fields it implicates."""

    model_config = {"frozen": True}

    status: Literal["invalid"] = "invalid"
    kind: ErrorKind
    fields: tuple[InputField, ...]

    @property
    def ok(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    @classmethod
    def of(cls, kind: ErrorKind) -> Invalid:
        """Build the outcome for *kind* with its standard offending fields."""
        return cls(kind=kind, fields=kind.fields)


ValidationOutcome = Annotated[Valid | Invalid, Field(discriminator="status")]

OUTCOME_ADAPTER: TypeAdapter[Valid | Invalid] = TypeAdapter(ValidationOutcome)
