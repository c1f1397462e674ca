from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ParseResult(Generic[ModelT]):
    value: Optional[ModelT] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def parse_payload(model: Type[ModelT], raw: Any) -> ParseResult[ModelT]:
    """Validate raw JSON into ``model``; failures come back as field errors."""
    try:
        return ParseResult(value=model.model_validate(raw, from_attributes=False))
    except ValidationError as e:
        return ParseResult(errors=format_errors(e))


def format_errors(exc: ValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "body",
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
