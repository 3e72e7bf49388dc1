from dataclasses import dataclass


@dataclass(frozen=True)
class InputChange:
    """A field edit: which field changed and its new raw string value."""

    field: str
    value: str
