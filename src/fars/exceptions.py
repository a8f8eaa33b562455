"""Exceptions raised by the FARS package."""


class FarsError(Exception):
    """Base class for all FARS package errors."""
    pass


class FarsFileNotFoundError(FarsError, FileNotFoundError):
    """
    Raised when a yearly accident file does not exist.

    The message always contains the attempted filename.
    """

    def __init__(self, filename):
        # Kept off OSError.filename, whose __str__ would then render
        # "[Errno None] None: '<path>'".
        self.path = str(filename)
        super().__init__(f"file '{self.path}' does not exist")


class InvalidStateError(FarsError, ValueError):
    """Raised when a state number does not appear in a year's STATE column."""

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


class MissingColumnsError(FarsError, KeyError):
    """Raised when an accident table lacks columns an operation needs."""

    def __init__(self, missing, available=None):
        self.missing = list(missing)
        self.available = list(available) if available is not None else None
        super().__init__(missing)

    def __str__(self) -> str:
        msg = f"Missing required columns: {self.missing}"
        if self.available is not None:
            msg += f". Available={self.available}"
        return msg


def require_columns(df, required) -> None:
    """
    Raise MissingColumnsError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing, df.columns)
