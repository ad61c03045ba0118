"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Immutable record of a single password generation.

    Describes how a password was produced, never what it contains.

    Attributes:
        timestamp_ns: Wall-clock time of generation (nanoseconds since epoch).
        index: Position of the password within its batch (1-based).
        length: Password length.
        classes: Names of the active character classes, in sampling order.
        alphabet_size: Size of the combined alphabet.
        entropy_source: Name of the entropy source that provided bytes.
        bytes_drawn: Entropy bytes consumed, rejected ones included.
        rejections: Bytes discarded by rejection sampling.
        elapsed_ms: Time to build the password (milliseconds).
    """

    timestamp_ns: int
    index: int
    length: int
    classes: tuple[str, ...]
    alphabet_size: int
    entropy_source: str
    bytes_drawn: int
    rejections: int
    elapsed_ms: float
