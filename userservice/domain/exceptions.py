class UserNotFound(Exception):
    pass


class UserValidationError(Exception):
    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")


class StorageError(Exception):
    """Raised when the persistence layer fails (connectivity, constraint, query)."""

    pass
