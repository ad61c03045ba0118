"""Unbiased index sampling and secure shuffling over a byte domain.

``uniform_index(n)`` maps single entropy bytes onto ``[0, n)`` by rejection
sampling. Reducing a byte with ``b % n`` directly would over-represent the
indices ``0 .. (256 % n) - 1`` whenever ``n`` does not divide 256, so bytes
at or above the largest multiple of ``n`` that fits in the domain are
discarded and redrawn.

Worst case is ``n = 129``: ``limit = 129`` and almost half the bytes are
rejected. The expected number of draws stays below two for every ``n``.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TYPE_CHECKING, Any

from pwtool.exceptions import InvalidDomainError

if TYPE_CHECKING:
    from pwtool.entropy.base import EntropySource

BYTE_DOMAIN = 256


def rejection_limit(n: int) -> int:
    """Return the largest multiple of *n* not exceeding the byte domain.

    Args:
        n: Domain size in ``[1, 256]``.

    Returns:
        ``256 - (256 % n)``. Bytes ``>=`` this value are rejected.
    """
    return BYTE_DOMAIN - (BYTE_DOMAIN % n)


class UniformSampler:
    """Draws uniform indices and permutations from an entropy source.

    The source is passed in explicitly, never looked up globally, so tests
    can supply deterministic byte streams. The sampler keeps two counters for
    diagnostics and is otherwise stateless; give each thread its own
    sampler.

    Args:
        source: Entropy source providing raw bytes.
    """

    def __init__(self, source: EntropySource) -> None:
        self._source = source
        self._buffer = bytearray(1)
        self.draws = 0
        self.rejections = 0

    @property
    def source(self) -> EntropySource:
        """The underlying entropy source."""
        return self._source

    def reset_counters(self) -> None:
        """Zero the ``draws`` and ``rejections`` counters."""
        self.draws = 0
        self.rejections = 0

    def uniform_index(self, n: int) -> int:
        """Return an index in ``[0, n)``, each with probability exactly ``1/n``.

        No retry cap is applied. A source that stops producing bytes
        raises ``EntropyUnavailableError`` rather than timing out here.

        Args:
            n: Domain size, ``1 <= n <= 256``.

        Returns:
            Uniformly distributed index.

        Raises:
            InvalidDomainError: If *n* is not an int in ``[1, 256]``.
            EntropyUnavailableError: Propagated from the entropy source.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0 or n > BYTE_DOMAIN:
            raise InvalidDomainError(f"Index domain must be in [1, {BYTE_DOMAIN}], got {n!r}")

        limit = rejection_limit(n)
        while True:
            self._source.fill(self._buffer, 1)
            self.draws += 1
            b = self._buffer[0]
            if b < limit:
                return b % n
            self.rejections += 1

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Permute *items* in place with a Fisher–Yates pass.

        Scans from the end, swapping position ``i - 1`` with a uniformly
        chosen ``j`` in ``[0, i)``. The multiset of elements is unchanged.

        Args:
            items: Mutable sequence of at most 256 elements.

        Raises:
            InvalidDomainError: If *items* holds more than 256 elements.
        """
        for i in range(len(items), 1, -1):
            j = self.uniform_index(i)
            items[i - 1], items[j] = items[j], items[i - 1]

    def choice(self, alphabet: str) -> str:
        """Return one character of *alphabet* chosen uniformly by position."""
        return alphabet[self.uniform_index(len(alphabet))]
