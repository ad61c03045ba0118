"""Abstract base class for all entropy sources.

Every entropy source — OS randomness or a deterministic test double —
implements this interface. The ABC provides a default ``fill()`` that
delegates to ``get_random_bytes()`` and a concrete ``health_check()``
method. Subclasses must implement the four abstract members: ``name``,
``is_available``, ``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations hold no shared internal buffer, so a single instance may
    be called from several threads. Only sources that set ``secure = True``
    may be selected through configuration; test doubles leave it ``False``.
    """

    secure: ClassVar[bool] = False
    """Whether the bytes come from a cryptographically secure generator."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def fill(self, buffer: bytearray | memoryview, length: int) -> None:
        """Write *length* random bytes into the start of *buffer*.

        Args:
            buffer: Writable buffer of at least *length* bytes.
            length: Number of bytes to write.

        Raises:
            ValueError: If *length* is negative or exceeds the buffer size.
            EntropyUnavailableError: If the source cannot provide bytes.
        """
        if length < 0 or length > len(buffer):
            raise ValueError(
                f"Cannot fill {length} bytes into a buffer of size {len(buffer)}"
            )
        if length == 0:
            return
        buffer[:length] = self.get_random_bytes(length)

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, device descriptors)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
