"""Exceptions raised by the relationship core and the person stores."""

from __future__ import annotations


class KinshipError(Exception):
    """Base exception for this package"""


class PersonNotFoundError(KinshipError):
    """A supplied name does not resolve to any person (user-facing)."""

    def __init__(self, name: str):
        super().__init__(f'Unknown person "{name}"')
        self.name = name


class InconsistentDataError(KinshipError):
    """The family graph breaks a precondition (dangling parent id, spouse-less non-royal, ...)."""


class DuplicatePersonError(KinshipError):
    """A person with the same (case-insensitive) name already exists."""

    def __init__(self, name: str):
        super().__init__(f'A person named "{name}" already exists')
        self.name = name
