"""Errors raised by the filegate app."""


class FilegateError(Exception):
    """Base class for filegate errors."""


class InvalidIdentifierError(FilegateError):
    """A requested file identifier is not a clean storage-relative path."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid file identifier {identifier!r}: {reason}")


class InvalidGroupListError(FilegateError):
    """A file's fe_groups value contains a token that is not a group id."""

    def __init__(self, value: str, token: str):
        self.value = value
        self.token = token
        super().__init__(f"Invalid group id {token!r} in group list {value!r}")
