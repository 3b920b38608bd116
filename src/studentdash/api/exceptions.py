"""Exceptions raised by the REST layer."""


class FormValidationError(Exception):
    """A submitted student form has failing fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Validation failed: " + ", ".join(sorted(errors)))
        self.errors = errors
