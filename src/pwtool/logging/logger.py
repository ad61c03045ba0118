"""Diagnostic logger for password generation events.

Uses the standard ``logging`` module with the ``"pwtool"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pwtool.config import PwtoolConfig
    from pwtool.logging.types import GenerationRecord

logger = logging.getLogger("pwtool")


class GenerationLogger:
    """Per-password diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per password with length, alphabet size,
        bytes drawn and rejections.

        ``"full"``: Full JSON dump of all record fields.

    Records are emitted at DEBUG level so they stay out of normal CLI
    output unless verbose logging is switched on.
    """

    def __init__(self, config: PwtoolConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[GenerationRecord] = []

    def log_generation(self, record: GenerationRecord) -> None:
        """Log a single generation event.

        Args:
            record: Immutable record of the generation.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.debug(
                "password=%d length=%d alphabet=%d classes=%s source=%s "
                "bytes=%d rejected=%d elapsed=%.3fms",
                record.index,
                record.length,
                record.alphabet_size,
                ",".join(record.classes),
                record.entropy_source,
                record.bytes_drawn,
                record.rejections,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.debug("generation_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[GenerationRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        total_bytes = sum(r.bytes_drawn for r in self._records)
        total_rejections = sum(r.rejections for r in self._records)
        elapsed = [r.elapsed_ms for r in self._records]
        return {
            "total_passwords": n,
            "total_bytes": total_bytes,
            "total_rejections": total_rejections,
            "mean_bytes_per_password": total_bytes / n,
            "rejection_rate": total_rejections / total_bytes if total_bytes else 0.0,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
