"""Errors raised by the CRUD layer."""


class InvalidFilterFieldError(Exception):
    """Raised when a list request filters on fields that are not allowed."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(*self.fields)

    def __str__(self):
        if len(self.fields) == 1:
            return f"invalid filter field: {self.fields[0]}"
        return f"invalid filter fields: {', '.join(self.fields)}"