"""Deterministic entropy sources for testing.

Neither source here is cryptographically secure. They exist so that the
sampler and builder can be exercised against reproducible byte streams, and
are never registered: they reach a sampler only by direct injection.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from pwtool.entropy.base import EntropySource
from pwtool.exceptions import EntropyUnavailableError


class MockUniformSource(EntropySource):
    """Seeded pseudo-random byte source.

    Draws bytes uniformly from ``[0, 255]`` with a numpy generator, so runs
    with the same *seed* produce identical passwords.

    Args:
        seed: Optional RNG seed for reproducible output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'mock_uniform'``."""
        return "mock_uniform"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* uniformly distributed bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """No-op — no resources to release."""


class SequenceEntropySource(EntropySource):
    """Replays a fixed byte sequence, then reports exhaustion.

    Used to pin down exactly which bytes the sampler accepts or rejects.
    Once the sequence runs out every call raises
    :class:`~pwtool.exceptions.EntropyUnavailableError`.

    Args:
        data: Byte values (0–255) to serve, in order.
    """

    def __init__(self, data: Iterable[int] = b"") -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def name(self) -> str:
        """Return ``'sequence'``."""
        return "sequence"

    @property
    def is_available(self) -> bool:
        """``True`` while unread bytes remain."""
        return self._position < len(self._data)

    @property
    def consumed(self) -> int:
        """Number of bytes served so far."""
        return self._position

    def get_random_bytes(self, n: int) -> bytes:
        """Return the next *n* bytes of the sequence.

        Args:
            n: Number of bytes to return.

        Returns:
            Exactly *n* bytes.

        Raises:
            EntropyUnavailableError: If fewer than *n* bytes remain.
        """
        end = self._position + n
        if end > len(self._data):
            raise EntropyUnavailableError(
                f"Byte sequence exhausted: requested {n}, "
                f"{len(self._data) - self._position} remaining"
            )
        chunk = self._data[self._position : end]
        self._position = end
        return chunk

    def close(self) -> None:
        """No-op — no resources to release."""
