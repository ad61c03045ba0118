"""System entropy source using ``os.urandom()``.

This is the default source. It reads from the operating system CSPRNG and
holds no state, so it is safe to share between threads.
"""

from __future__ import annotations

import os

from pwtool.entropy.base import EntropySource
from pwtool.entropy.registry import register_entropy_source
from pwtool.exceptions import EntropyUnavailableError


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper.

    Failures of the underlying primitive are reported as
    :class:`~pwtool.exceptions.EntropyUnavailableError` and never retried.
    """

    secure = True

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Probe the OS CSPRNG with a one-byte read."""
        try:
            os.urandom(1)
        except (OSError, NotImplementedError):
            return False
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.

        Raises:
            EntropyUnavailableError: If the OS randomness source fails.
        """
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(f"OS randomness source failed: {exc}") from exc

    def close(self) -> None:
        """No-op — no resources to release."""
