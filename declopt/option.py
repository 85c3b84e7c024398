# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the immutable declaration of one command-line
option: the spellings it accepts, how many times it may appear, whether it
takes a parameter, and what values it defaults to when omitted.

Options are usually built with `Option.from_appearance()`:

    port = Option.from_appearance(names("--port", "-p"), Appearance.OPTIONAL, default="8080")
    verbose = Option.from_appearance(names("--verbose"), Appearance.OPTIONAL_NO_PARAMETER)

The first name is the canonical name. It is the key under which parsed values
are reported, whatever spelling the user typed.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from declopt.appearance import Appearance
from declopt.exceptions import OptionDeclarationError


def names(*spellings: str) -> tuple[str, ...]:
    """Bundle option spellings, canonical name first."""
    return tuple(spellings)


@dataclass(frozen=True)
class Option:
    """
    Represents a declared command-line option.

    Attributes:
        names (tuple[str, ...]): Accepted spellings, canonical name first.
        min_appearances (int): Minimum number of occurrences.
        max_appearances (int | None): Maximum number of occurrences, None for unbounded.
        no_parameter (bool): True if the option is a bare flag.
        default_values (tuple[str, ...]): Values reported when an optional option is absent.
    """

    names: tuple[str, ...]
    min_appearances: int = 0
    max_appearances: int | None = 1
    no_parameter: bool = False
    default_values: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.names, str):
            raise OptionDeclarationError(
                f"names must be a sequence of strings, not the string '{self.names}'"
            )
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "default_values", tuple(self.default_values))
        if not self.names:
            raise OptionDeclarationError("An option needs at least one name")
        for name in self.names:
            if not isinstance(name, str) or not name:
                raise OptionDeclarationError(
                    f"Option names must be non-empty strings, got {name!r}"
                )
        if self.min_appearances < 0:
            raise OptionDeclarationError("min_appearances must not be negative")
        if self.max_appearances is not None and self.min_appearances > self.max_appearances:
            raise OptionDeclarationError(
                f"Option '{self.names[0]}' has min_appearances={self.min_appearances} "
                f"greater than max_appearances={self.max_appearances}"
            )
        for value in self.default_values:
            if not isinstance(value, str):
                raise OptionDeclarationError(
                    f"Default values of '{self.names[0]}' must be strings, got {value!r}"
                )
        if self.default_values and (self.no_parameter or self.min_appearances >= 1):
            kind = "flag" if self.no_parameter else "mandatory option"
            raise OptionDeclarationError(
                f"'{self.names[0]}' is a {kind} and cannot have default values"
            )

    @classmethod
    def from_appearance(
        cls,
        option_names: tuple[str, ...] | list[str],
        appearance: Appearance | str,
        default: str | None = None,
    ) -> Option:
        """
        Build an option from an appearance policy.

        Args:
            option_names (tuple[str, ...] | list[str]): Accepted spellings.
            appearance (Appearance | str): Cardinality policy or its alias.
            default (str | None): Default value; only OPTIONAL and OPTIONAL_REPEAT
                options may declare one.

        Raises:
            OptionDeclarationError: If a default is given for any other policy,
                or is not a string.
        """
        appearance = Appearance(appearance)
        if default is not None and not isinstance(default, str):
            raise OptionDeclarationError(
                f"Default value of '{option_names[0] if option_names else ''}' must be "
                f"a string, got {default!r}"
            )
        if default is not None and not appearance.accepts_default:
            raise OptionDeclarationError(
                f"Option '{option_names[0] if option_names else ''}' is {appearance} "
                "and cannot have a default value"
            )
        return cls(
            names=tuple(option_names),
            min_appearances=appearance.min_appearances,
            max_appearances=appearance.max_appearances,
            no_parameter=appearance.no_parameter,
            default_values=(default,) if default is not None else (),
        )

    @property
    def canonical_name(self) -> str:
        return self.names[0]

    @property
    def is_mandatory(self) -> bool:
        return self.min_appearances >= 1

    def __str__(self) -> str:
        maximum = "*" if self.max_appearances is None else self.max_appearances
        return (
            f"Option(names={list(self.names)}, appearances={self.min_appearances}..{maximum}, "
            f"no_parameter={self.no_parameter})"
        )
