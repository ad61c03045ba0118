"""Batch password generation — the orchestration layer for pwtool.

Wires the configured entropy source, the uniform sampler, the password
builder and the diagnostic logger together::

    entropy source -> UniformSampler -> PasswordBuilder -> list[str]

Passwords in a batch are generated sequentially and independently. Any
error aborts the whole batch; no partial result is returned.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pwtool.builder import PasswordBuilder
from pwtool.config import PwtoolConfig, load_config
from pwtool.entropy import EntropySourceRegistry
from pwtool.exceptions import ConfigValidationError
from pwtool.logging.logger import GenerationLogger
from pwtool.logging.types import GenerationRecord
from pwtool.sampling.sampler import UniformSampler

if TYPE_CHECKING:
    from pwtool.charset import ClassSet
    from pwtool.entropy.base import EntropySource

logger = logging.getLogger("pwtool")


def _build_entropy_source(config: PwtoolConfig) -> EntropySource:
    """Instantiate the entropy source named by the configuration.

    Raises:
        ConfigValidationError: If no source is registered under that name,
            or the registered source is not cryptographically secure.
    """
    try:
        source_cls = EntropySourceRegistry.get(config.entropy_source_type)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc
    if not source_cls.secure:
        raise ConfigValidationError(
            f"Entropy source {config.entropy_source_type!r} is not cryptographically secure"
        )
    return source_cls()


class PasswordGenerator:
    """Generates batches of passwords from a single configuration.

    Args:
        config: Configuration; loaded from the environment when ``None``.
        source: Entropy source to use instead of the configured one.
    """

    def __init__(
        self,
        config: PwtoolConfig | None = None,
        source: EntropySource | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._source = source if source is not None else _build_entropy_source(self._config)
        self._sampler = UniformSampler(self._source)
        self._builder = PasswordBuilder(self._sampler)
        self._logger = GenerationLogger(self._config)

        logger.debug(
            "PasswordGenerator initialized: entropy_source=%s, length=%d, no_special=%s",
            self._source.name,
            self._config.length,
            self._config.no_special,
        )

    @property
    def config(self) -> PwtoolConfig:
        """The active configuration."""
        return self._config

    @property
    def diagnostics(self) -> GenerationLogger:
        """Logger holding generation records."""
        return self._logger

    def generate(
        self,
        length: int | None = None,
        class_set: ClassSet | None = None,
    ) -> str:
        """Generate one password.

        Args:
            length: Password length; config value when ``None``.
            class_set: Active classes; derived from config when ``None``.

        Returns:
            A fresh password.
        """
        return self._generate_one(1, length, class_set)

    def generate_batch(
        self,
        count: int | None = None,
        length: int | None = None,
        class_set: ClassSet | None = None,
    ) -> list[str]:
        """Generate *count* independent passwords, in order.

        Args:
            count: Number of passwords; config value when ``None``.
            length: Password length; config value when ``None``.
            class_set: Active classes; derived from config when ``None``.

        Returns:
            List of *count* passwords.

        Raises:
            ConfigValidationError: If *count* is below 1.
            InvalidLengthError: If *length* is out of range.
            EntropyUnavailableError: If the entropy source fails.
        """
        if count is None:
            count = self._config.count
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ConfigValidationError(f"Password count must be >= 1, got {count!r}")

        return [self._generate_one(i, length, class_set) for i in range(1, count + 1)]

    def _generate_one(
        self,
        index: int,
        length: int | None,
        class_set: ClassSet | None,
    ) -> str:
        if length is None:
            length = self._config.length
        if class_set is None:
            class_set = self._config.class_set()

        self._sampler.reset_counters()
        t_start = time.perf_counter()
        password = self._builder.build(length, class_set)
        elapsed_ms = (time.perf_counter() - t_start) * 1000.0

        self._logger.log_generation(
            GenerationRecord(
                timestamp_ns=time.time_ns(),
                index=index,
                length=length,
                classes=tuple(c.value for c in class_set.classes),
                alphabet_size=len(class_set.combined_alphabet()),
                entropy_source=self._source.name,
                bytes_drawn=self._sampler.draws,
                rejections=self._sampler.rejections,
                elapsed_ms=elapsed_ms,
            )
        )
        return password

    def health_check(self) -> dict[str, Any]:
        """Return the entropy source health status."""
        return self._source.health_check()

    def close(self) -> None:
        """Release the entropy source."""
        self._source.close()

    def __enter__(self) -> PasswordGenerator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
