class GstError(Exception):
    """Base class for errors raised by the GST engine."""


class MissingInput(GstError):
    """A required field is absent (e.g. empty GSTIN)."""


class FormatError(GstError):
    """Input is present but structurally invalid."""


class UnknownJurisdiction(GstError):
    """GSTIN is well formed but its state code is not registered."""


class InvalidNumberError(GstError, ValueError):
    """Malformed numeric field, raised only in strict mode."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid number for {field}: {value!r}")


ERROR_KINDS = {
    "MissingInput": MissingInput,
    "FormatError": FormatError,
    "UnknownJurisdiction": UnknownJurisdiction,
}
