"""Password construction with guaranteed class coverage.

Pipeline:
    minimum picks per class -> uniform fill from combined alphabet -> shuffle.

The minimum picks always land in the first ``2 * len(classes)`` slots; the
final Fisher–Yates pass removes that positional pattern while keeping the
chosen characters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwtool.charset import ClassSet
from pwtool.exceptions import InvalidLengthError
from pwtool.sampling.sampler import BYTE_DOMAIN

if TYPE_CHECKING:
    from pwtool.sampling.sampler import UniformSampler

MIN_LENGTH = 16
MAX_LENGTH = BYTE_DOMAIN
MIN_PER_CLASS = 2


def validate_length(length: int) -> None:
    """Raise :class:`InvalidLengthError` unless ``16 <= length <= 256``.

    The upper bound comes from the shuffle, which samples positions from a
    single byte domain.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Password length must be an integer, got {length!r}")
    if length < MIN_LENGTH:
        raise InvalidLengthError(f"Password length must be >= {MIN_LENGTH}, got {length}")
    if length > MAX_LENGTH:
        raise InvalidLengthError(f"Password length must be <= {MAX_LENGTH}, got {length}")


class PasswordBuilder:
    """Builds one password per call from a :class:`UniformSampler`.

    Holds no state between calls besides the sampler; every password is
    constructed from fresh draws.

    Args:
        sampler: Source of uniform indices and shuffles.
    """

    def __init__(self, sampler: UniformSampler) -> None:
        self._sampler = sampler

    @property
    def sampler(self) -> UniformSampler:
        """The sampler driving this builder."""
        return self._sampler

    def build(self, length: int, class_set: ClassSet | None = None) -> str:
        """Generate a password of *length* characters.

        Args:
            length: Target length, ``16 <= length <= 256``.
            class_set: Active classes. Defaults to all four with the default
                special alphabet.

        Returns:
            The password string.

        Raises:
            InvalidLengthError: If *length* is out of range.
            InvalidDomainError: If the combined alphabet exceeds 256 characters.
            EntropyUnavailableError: Propagated from the entropy source.
        """
        validate_length(length)
        if class_set is None:
            class_set = ClassSet()

        chars = self._minimum_picks(class_set)

        combined = class_set.combined_alphabet()
        while len(chars) < length:
            chars.append(self._sampler.choice(combined))

        self._sampler.shuffle(chars)
        return "".join(chars)

    def _minimum_picks(self, class_set: ClassSet) -> list[str]:
        """Draw ``MIN_PER_CLASS`` characters from each active class, in order."""
        chars: list[str] = []
        for _, alphabet in class_set.alphabets():
            for _ in range(MIN_PER_CLASS):
                chars.append(self._sampler.choice(alphabet))
        return chars
