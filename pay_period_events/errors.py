"""Error types raised by the event record store."""


class ValidationError(ValueError):
    """A submitted field failed validation; message is shown to the user."""


class StorageWriteError(RuntimeError):
    """Persisting the event table failed and the append was rolled back."""
