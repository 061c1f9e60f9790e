"""Error types raised by the prelude."""


class InvalidArgumentError(ValueError):
    """Raised when an operation is called with arguments outside its domain.

    Subclasses ValueError so callers that already guard numeric input with
    ``except ValueError`` keep working.
    """
