"""
Validation of create-order input.

Runs in the layer that accepts external input, before a CreateOrderRequest is
constructed. The repository assumes validated input and never calls this.
"""
from dataclasses import dataclass
from typing import Any, List, Mapping

from pydantic import ValidationError

from ordering.application.dtos.order_dto import CreateOrderRequest

QUANTITY_MESSAGE = "Quantity must be at least 1"


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class OrderValidationError(ValueError):
    """Raised when create-order input fails validation."""

    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def _message(error: dict) -> str:
    loc = error.get("loc", ())
    if loc and loc[-1] == "quantity" and error.get("type") in (
        "greater_than_equal",
        "int_parsing",
        "int_type",
        "int_from_float",
    ):
        return QUANTITY_MESSAGE

    message = error.get("msg", "Invalid value")
    # pydantic prefixes messages raised from validators
    return message.removeprefix("Value error, ")


def validate_create_order(payload: Mapping[str, Any]) -> List[FieldError]:
    """Validate raw create-order input.

    Checks required fields, UUID formats, at least one item, quantities of at
    least 1 and unique product IDs across items.

    Args:
        payload: Decoded JSON body

    Returns:
        List of FieldError (empty when the input is valid)
    """
    if not isinstance(payload, Mapping):
        return [FieldError(field="__root__", message="Order must be a JSON object")]

    try:
        CreateOrderRequest.model_validate(payload)
    except ValidationError as exc:
        return [
            FieldError(field=_field_path(error["loc"]), message=_message(error))
            for error in exc.errors()
        ]
    return []


def parse_create_order(payload: Mapping[str, Any]) -> CreateOrderRequest:
    """Validate raw input and build a CreateOrderRequest.

    Raises:
        OrderValidationError: If any field fails validation
    """
    errors = validate_create_order(payload)
    if errors:
        raise OrderValidationError(errors)
    return CreateOrderRequest.model_validate(payload)
