"""Explicit payload validation returning a result instead of raising.

Used where a request carries several payloads (batch and class saves) so the
caller can check every element before touching storage.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    value: Optional[ModelT] = None
    details: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.details


def validate_payload(model: Type[ModelT], data: Any, loc_prefix: Sequence[Any] = ()) -> ValidationResult[ModelT]:
    """Validate ``data`` against ``model``; field errors get ``loc_prefix`` prepended to their loc."""
    try:
        return ValidationResult(value=model.model_validate(data))
    except ValidationError as exc:
        details = []
        for err in exc.errors(include_url=False, include_context=False):
            err["loc"] = [*loc_prefix, *err["loc"]]
            details.append(err)
        return ValidationResult(details=details)
