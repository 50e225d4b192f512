"""Domain level exceptions raised by the template use cases."""

from __future__ import annotations


class TemplateNotFoundError(LookupError):
    """Raised when a template id does not exist."""

    def __init__(self, template_id: int) -> None:
        self.template_id = template_id
        super().__init__("Template not found")


class TemplateValidationError(ValueError):
    """Raised when a template payload is malformed.

    ``field`` is the dotted path of the offending attribute, mirroring the
    ``{message, field}`` body returned by the API.
    """

    def __init__(self, message: str, *, field: str) -> None:
        self.message = message
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "field": self.field}


class InvalidSampleDataError(ValueError):
    """Raised by the editor when the sample data text is not valid JSON."""

    title = "Invalid JSON"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__("Please fix the sample data JSON before saving.")


__all__ = [
    "InvalidSampleDataError",
    "TemplateNotFoundError",
    "TemplateValidationError",
]
