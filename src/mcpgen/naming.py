"""Project name validation and derivation of the name variants used in templates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .errors import InvalidProjectNameError

__all__ = ["NameFormatSet", "ProjectIdentifier", "format_names", "MIN_LENGTH", "MAX_LENGTH"]


MIN_LENGTH = 3
MAX_LENGTH = 50

_IDENTIFIER = re.compile(r"^[a-z][a-z0-9-]*[a-z0-9]$")


@dataclass(frozen=True, slots=True)
class ProjectIdentifier:
    """A validated kebab-case project name.

    The value must start with a lowercase letter, contain only lowercase
    letters, digits and hyphens, end with a letter or digit, and be between
    :data:`MIN_LENGTH` and :data:`MAX_LENGTH` characters long. Construction
    fails with :class:`~mcpgen.errors.InvalidProjectNameError` otherwise.
    """

    value: str

    def __post_init__(self) -> None:
        value: Any = self.value
        if not value or not isinstance(value, str):
            raise InvalidProjectNameError("Project name is required")

        if not _IDENTIFIER.match(value):
            raise InvalidProjectNameError(
                "Project name must start with a lowercase letter, contain only lowercase "
                "letters, numbers, and hyphens, and end with a letter or number"
            )

        if not MIN_LENGTH <= len(value) <= MAX_LENGTH:
            raise InvalidProjectNameError(
                f"Project name must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
            )

    @property
    def segments(self) -> list[str]:
        return self.value.split("-")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class NameFormatSet:
    """Case variants of a :class:`ProjectIdentifier`.

    Attributes
    ----------
    kebab:
        The identifier itself, e.g. ``weather-service``.
    pascal:
        Capitalized segments joined together, e.g. ``WeatherService``.
    title:
        Capitalized segments joined with spaces, e.g. ``Weather Service``.
    camel:
        Like :attr:`pascal` but with the first segment left lowercase.
    constant:
        Upper case with underscores, e.g. ``WEATHER_SERVICE``.
    """

    kebab: str
    pascal: str
    title: str
    camel: str
    constant: str

    def as_dict(self) -> dict[str, str]:
        return {
            "kebab": self.kebab,
            "pascal": self.pascal,
            "title": self.title,
            "camel": self.camel,
            "constant": self.constant,
        }


def _capitalize(segment: str) -> str:
    # Digit-led segments such as "3d" come back unchanged.
    return segment[:1].upper() + segment[1:]


def format_names(identifier: ProjectIdentifier) -> NameFormatSet:
    """Derive every :class:`NameFormatSet` variant from ``identifier``."""

    segments = identifier.segments
    capitalized = [_capitalize(segment) for segment in segments]

    return NameFormatSet(
        kebab=identifier.value,
        pascal="".join(capitalized),
        title=" ".join(capitalized),
        camel=segments[0] + "".join(capitalized[1:]),
        constant=identifier.value.upper().replace("-", "_"),
    )
