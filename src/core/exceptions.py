class DecodeError(ValueError):
    """Raised when a stored chain encoding cannot be decoded.

    Rows are written from data the chain already validated, so a failure here
    means the stored value is corrupted or was written with a different
    encoding. Callers must treat it as a data integrity violation and abort
    the current operation, never as bad user input to recover from.
    """

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"cannot decode {field} {value!r}: {reason}")


class SnapshotOrderError(ValueError):
    """Raised when a snapshot would be appended below the latest height."""
