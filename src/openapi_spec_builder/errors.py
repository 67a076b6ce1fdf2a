"""Exceptions raised while building a strict document.

Three channels reach the caller: the relaxed document could not be reshaped
(ShapeError), the reshaped document broke the Swagger 2.0 rules
(ConformanceError), or the rules could not be checked at all
(ValidatorUnavailableError).
"""

from typing import Any, Sequence


class SpecBuilderError(Exception):
    """Base class for every build failure."""


class ShapeError(SpecBuilderError):
    """The relaxed document cannot be traversed by the normalizer."""

    def __init__(self, message: str, location: Sequence[str | int] = ()):
        self.location = tuple(location)
        if self.location:
            message = f"{message} (at {_format_location(self.location)})"
        super().__init__(message)


class DuplicateKeyError(ShapeError):
    """Two entries normalize to the same key and duplicates are not allowed."""


class ConformanceError(SpecBuilderError):
    """The normalized document fails the conformance rules.

    ``errors`` holds the validator's diagnostics exactly as it reported them.
    """

    def __init__(self, errors: Sequence[Any]):
        self.errors = list(errors)
        super().__init__(f"document failed conformance validation with {len(self.errors)} error(s)")


class ValidatorUnavailableError(SpecBuilderError):
    """The conformance validator itself failed; the document was not checked."""


def _format_location(location: tuple[str | int, ...]) -> str:
    return "".join(f"[{part!r}]" for part in location)
