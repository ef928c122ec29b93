"""Domain errors - store failures, validation and lookup errors."""


class ItemStoreError(Exception):
    """Backing store failure (server-side)."""

    status_code = 500

    def __init__(self, message: str = "Item store error"):
        self.message = message
        super().__init__(self.message)


class StoreUnreadable(ItemStoreError):
    """Blob is missing or cannot be read."""

    def __init__(self, message: str = "Failed to read data file"):
        super().__init__(message)


class StoreCorrupt(ItemStoreError):
    """Blob content cannot be parsed into records."""

    def __init__(self, message: str = "Data file is corrupt"):
        super().__init__(message)


class StoreUnwritable(ItemStoreError):
    """Blob cannot be written."""

    def __init__(self, message: str = "Failed to write data file"):
        super().__init__(message)


class StoreTimeout(ItemStoreError):
    """Store operation did not finish in time."""

    status_code = 504

    def __init__(self, message: str = "Data file operation timed out"):
        super().__init__(message)


class ValidationError(Exception):
    """Invalid input field (client-side)."""

    status_code = 400

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        self.message = f"{field.capitalize()} {reason}"
        super().__init__(self.message)


class NotFoundError(Exception):
    """Resource not found."""

    status_code = 404

    def __init__(self, message: str = "Item not found"):
        self.message = message
        super().__init__(self.message)
