"""Presence checks for form submissions."""
from typing import Iterable, Mapping


class MissingInformationError(ValueError):
    """Raised when a required form field is empty. Nothing is changed."""

    title = "Missing Information"

    def __init__(self, fields, message=None):
        self.fields = tuple(fields)
        self.message = message or "Please provide: " + ", ".join(self.fields)
        super().__init__(self.message)


class EmptyCartError(MissingInformationError):
    title = "Empty Cart"

    def __init__(self):
        super().__init__(("cart",), "Please add products to the cart")


def missing_fields(data: Mapping, required: Iterable[str]) -> list:
    """Return the required keys whose value is absent or blank."""
    missing = []
    for name in required:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def require_fields(data: Mapping, required: Iterable[str], message=None) -> None:
    missing = missing_fields(data, required)
    if missing:
        raise MissingInformationError(missing, message)
