# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Appearance`, the enum describing how often an option may appear on a
command line and whether it takes a parameter.

Each member maps to a `(min_appearances, max_appearances, no_parameter)`
triple. `max_appearances` is `None` when the option may repeat without limit.

Supports alias coercion for config-friendly values, so declaration files can
say `flag` or `required` instead of the full member value.

Example:
    Appearance("optional")        → Appearance.OPTIONAL
    Appearance("Optional-Repeat") → Appearance.OPTIONAL_REPEAT
    Appearance("flag")            → Appearance.OPTIONAL_NO_PARAMETER
"""
from __future__ import annotations

from enum import Enum


class Appearance(Enum):
    """
    Cardinality and parameter contract of a declared option.

    Members:
        MANDATORY: Exactly once, with a parameter.
        MANDATORY_REPEAT: At least once, with a parameter each time.
        OPTIONAL: At most once, with a parameter.
        OPTIONAL_REPEAT: Any number of times, with a parameter each time.
        OPTIONAL_NO_PARAMETER: At most once, as a bare flag.

    Aliases:
        - "required" → "mandatory"
        - "required_repeat" → "mandatory_repeat"
        - "repeat" → "optional_repeat"
        - "flag" → "optional_no_parameter"
    """

    MANDATORY = "mandatory"
    MANDATORY_REPEAT = "mandatory_repeat"
    OPTIONAL = "optional"
    OPTIONAL_REPEAT = "optional_repeat"
    OPTIONAL_NO_PARAMETER = "optional_no_parameter"

    @property
    def min_appearances(self) -> int:
        return 1 if self in (Appearance.MANDATORY, Appearance.MANDATORY_REPEAT) else 0

    @property
    def max_appearances(self) -> int | None:
        if self in (Appearance.MANDATORY_REPEAT, Appearance.OPTIONAL_REPEAT):
            return None
        return 1

    @property
    def no_parameter(self) -> bool:
        return self is Appearance.OPTIONAL_NO_PARAMETER

    @property
    def accepts_default(self) -> bool:
        """Whether an explicit default value may be declared for this policy."""
        return self in (Appearance.OPTIONAL, Appearance.OPTIONAL_REPEAT)

    @classmethod
    def choices(cls) -> list[Appearance]:
        """Return a list of all appearance policies."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "required": "mandatory",
            "required_repeat": "mandatory_repeat",
            "repeat": "optional_repeat",
            "flag": "optional_no_parameter",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Appearance:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the appearance policy."""
        return self.value
