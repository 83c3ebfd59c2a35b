from __future__ import annotations


class PopulateError(Exception):
    """Base class for errors raised while populating pods."""


class SourceDirectoryError(PopulateError):
    """The LDBC source directory cannot be listed. Aborts the run."""


class ProfileError(PopulateError):
    """A WebID profile could not be read or written."""

    def __init__(self, account: str, path: str, reason: str):
        super().__init__(f"profile of {account} at {path}: {reason}")
        self.account = account
        self.path = path


class RegistrationError(PopulateError):
    """The pod server refused or failed a registration request."""


class UnresolvedFriendError(PopulateError):
    """A friend reference has no counterpart in the target namespace."""

    def __init__(self, ref: str, reason: str):
        super().__init__(f"cannot resolve friend {ref}: {reason}")
        self.ref = ref
