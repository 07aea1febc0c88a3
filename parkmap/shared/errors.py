class ValidationError(ValueError):
    """Input with the wrong shape or out of range."""


class NotFoundError(LookupError):
    """No parking location with the requested id."""


class StorageFailure(Exception):
    """The backing store could not be read or written."""
