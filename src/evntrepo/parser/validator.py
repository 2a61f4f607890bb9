"""Schema validation of parsed event documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from evntrepo.models.errors import SchemaIssue
from evntrepo.models.event import EventData


@dataclass(frozen=True)
class ValidationSuccess:
    data: BaseModel


@dataclass(frozen=True)
class ValidationFailure:
    issues: tuple[SchemaIssue, ...]


ValidationResult = ValidationSuccess | ValidationFailure


class EventValidator:
    """Validates plain JSON values against a pydantic schema model.

    Pydantic reports each error with a ``loc`` tuple of keys and indices,
    which is exactly the logical path the syntax tree locator consumes.
    """

    def __init__(self, schema: type[BaseModel] = EventData) -> None:
        self._schema = schema

    def validate(self, data: Any) -> ValidationResult:
        try:
            return ValidationSuccess(self._schema.model_validate(data))
        except ValidationError as exc:
            issues = tuple(
                SchemaIssue(path=tuple(error["loc"]), message=error["msg"])
                for error in exc.errors(include_url=False)
            )
            return ValidationFailure(issues)
