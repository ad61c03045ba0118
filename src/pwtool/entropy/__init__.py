"""Entropy source subsystem for pwtool.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from pwtool.entropy import EntropySource, EntropySourceRegistry
    from pwtool.entropy import SystemEntropySource, SequenceEntropySource
"""

from pwtool.entropy.base import EntropySource
from pwtool.entropy.mock import MockUniformSource, SequenceEntropySource
from pwtool.entropy.registry import EntropySourceRegistry, register_entropy_source
from pwtool.entropy.system import SystemEntropySource

__all__ = [
    "EntropySource",
    "EntropySourceRegistry",
    "MockUniformSource",
    "SequenceEntropySource",
    "SystemEntropySource",
    "register_entropy_source",
]
