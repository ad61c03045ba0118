"""Character classes and the per-run class set.

The class list is fixed and small, so it is an enumeration rather than a
hierarchy of class objects. :class:`ClassSet` decides which classes are
active for a run and which alphabet each one uses.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

from pwtool.exceptions import ConfigValidationError

DEFAULT_SPECIALS = "!@#$%^&*()-_=+[]{};:,.?"

# Printable ASCII, 0x20 through 0x7E.
_ALLOWED_SPECIALS = frozenset(chr(code) for code in range(0x20, 0x7F))


class CharacterClass(enum.Enum):
    """Character classes in the fixed order they are sampled."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SPECIAL = "special"


_DEFAULT_ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPER: string.ascii_uppercase,
    CharacterClass.LOWER: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SPECIAL: DEFAULT_SPECIALS,
}


@dataclass(frozen=True, slots=True)
class ClassSet:
    """Active character classes for one generation run.

    Upper, lower and digit are always active. Special is active unless
    *no_special* is set. A non-empty *special_override* replaces the default
    special alphabet; an empty one means "use the default".

    Characters shared between an override and another class are not
    deduplicated in the combined alphabet, so they are drawn more often
    during the fill phase.

    Attributes:
        no_special: Exclude the special class entirely.
        special_override: Replacement special alphabet, or ``""``.
    """

    no_special: bool = False
    special_override: str = ""

    def __post_init__(self) -> None:
        if self.special_override is None:
            object.__setattr__(self, "special_override", "")
        bad = sorted(set(self.special_override) - _ALLOWED_SPECIALS)
        if bad:
            raise ConfigValidationError(
                f"Special characters must be printable ASCII, got {''.join(bad)!r}"
            )

    @property
    def classes(self) -> tuple[CharacterClass, ...]:
        """Active classes in sampling order."""
        if self.no_special:
            return (CharacterClass.UPPER, CharacterClass.LOWER, CharacterClass.DIGIT)
        return tuple(CharacterClass)

    def alphabet(self, char_class: CharacterClass) -> str:
        """Return the alphabet used for *char_class* in this set."""
        if char_class is CharacterClass.SPECIAL and self.special_override:
            return self.special_override
        return _DEFAULT_ALPHABETS[char_class]

    def alphabets(self) -> list[tuple[CharacterClass, str]]:
        """Return ``(class, alphabet)`` pairs for every active class, in order."""
        return [(c, self.alphabet(c)) for c in self.classes]

    def combined_alphabet(self) -> str:
        """Concatenate the active alphabets, duplicates preserved."""
        return "".join(alphabet for _, alphabet in self.alphabets())
