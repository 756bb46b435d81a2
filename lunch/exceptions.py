"""Errors raised by the restaurant store."""


class LunchError(Exception):
    """Base class for all store errors."""


class InvalidInputError(LunchError):
    """A name or category failed validation."""


class DuplicateNameError(LunchError):
    """A restaurant with this name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Restaurant '{name}' already exists")
        self.name = name


class NoRestaurantsFoundError(LunchError):
    """No restaurant matched the requested category."""

    def __init__(self, category: str):
        super().__init__("No restaurants found!")
        self.category = category


class StorageError(LunchError):
    """The backing database failed."""


class StorageInitError(StorageError):
    """The database could not be created or opened."""


class StorageReadError(StorageError):
    """A query against the database failed."""


class StorageWriteError(StorageError):
    """A write to the database failed."""
