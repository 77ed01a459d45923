"""Custom exceptions for the NZFCC package."""

from __future__ import annotations


class NzfccError(Exception):
    """Base exception for all NZFCC errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SnapshotParseError(NzfccError):
    """Raised when a taxonomy snapshot is malformed or violates the schema."""

    pass


class SnapshotNotFoundError(NzfccError):
    """Raised when the snapshot file does not exist."""

    pass


class GenerationError(NzfccError):
    """Base exception for errors while synthesizing the enumerations."""

    pass


class DuplicateIdentifierError(GenerationError):
    """Raised when two display names derive the same identifier."""

    def __init__(
        self,
        identifier: str,
        first_name: str,
        second_name: str,
        enum_name: str,
    ) -> None:
        super().__init__(
            f"{enum_name}: {second_name!r} derives identifier {identifier!r}, "
            f"already taken by {first_name!r}",
            {"identifier": identifier, "names": [first_name, second_name], "enum": enum_name},
        )
        self.identifier = identifier
        self.first_name = first_name
        self.second_name = second_name
        self.enum_name = enum_name


class InvalidIdentifierError(GenerationError):
    """Raised when a display name derives an unusable identifier."""

    def __init__(self, display_name: str, identifier: str, reason: str) -> None:
        super().__init__(
            f"{display_name!r} derives invalid identifier {identifier!r}: {reason}",
            {"display_name": display_name, "identifier": identifier},
        )
        self.display_name = display_name
        self.identifier = identifier


class EmptyIdentifierError(InvalidIdentifierError):
    """Raised when a display name has no alphanumeric characters."""

    def __init__(self, display_name: str) -> None:
        super().__init__(display_name, "", "no alphanumeric characters")


class ParseCategoryGroupError(NzfccError, ValueError):
    """Raised when a string matches no category group display name."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown category group: {value!r}", {"value": value})
        self.value = value


class ParseNzfccCodeError(NzfccError, ValueError):
    """Raised when a string matches no NZFCC code display name."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown NZFCC code: {value!r}", {"value": value})
        self.value = value
