"""Diagnostic logging subsystem for pwtool.

Provides immutable per-password generation records and a configurable
logger that supports none/summary/full verbosity and in-memory
diagnostic mode.
"""

from pwtool.logging.logger import GenerationLogger
from pwtool.logging.types import GenerationRecord

__all__ = [
    "GenerationLogger",
    "GenerationRecord",
]
