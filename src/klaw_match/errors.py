"""Matcher error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'BackendUnavailable',
    'BackendUnavailableError',
    'MatchError',
    'NoPatternMatched',
    'NoPatternMatchedError',
]


class MatchError(Exception):
    """Base exception for klaw-match errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


# --- Dispatch Errors ---


class NoPatternMatched(msgspec.Struct, frozen=True, gc=False):
    """No arm matched and no default was given - struct variant."""

    message: str = 'No pattern matched and no default provided'
    tag: str | None = None

    def to_exception(self) -> NoPatternMatchedError:
        """Convert to exception for raise-based code."""
        return NoPatternMatchedError(self.message, tag=self.tag)


class NoPatternMatchedError(MatchError):
    """No arm matched and no default was given - exception variant.

    `tag` holds the discriminant text when raised by `match_tag`.
    """

    def __init__(self, message: str = 'No pattern matched and no default provided', *, tag: str | None = None) -> None:
        self.tag = tag
        super().__init__(message, 'no_match')

    def to_struct(self) -> NoPatternMatched:
        """Convert to struct for Result-based code."""
        return NoPatternMatched(self.message, self.tag)


# --- Backend Errors ---


class BackendUnavailable(msgspec.Struct, frozen=True, gc=False):
    """Native matcher could not be acquired - struct variant."""

    module: str
    reason: str

    def to_exception(self) -> BackendUnavailableError:
        """Convert to exception for raise-based code."""
        return BackendUnavailableError(self.module, self.reason)


class BackendUnavailableError(MatchError):
    """Native matcher could not be acquired - exception variant.

    Raised only inside the backend selector, which downgrades it to the
    interpreted matcher plus a warning log entry.
    """

    def __init__(self, module: str, reason: str) -> None:
        self.module = module
        self.reason = reason
        super().__init__(f'{module}: {reason}', 'backend_unavailable')

    def to_struct(self) -> BackendUnavailable:
        """Convert to struct for Result-based code."""
        return BackendUnavailable(self.module, self.reason)
