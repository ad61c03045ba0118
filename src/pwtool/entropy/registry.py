"""Name-to-class map of entropy sources.

Sources register themselves at import time with ``@register_entropy_source``.
Only modules imported by :mod:`pwtool.entropy` are registered, so the map
holds exactly the sources pwtool ships for production use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from pwtool.entropy.base import EntropySource


class EntropySourceRegistry:
    """Registry for entropy source classes, keyed by configuration name."""

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator to register a source class under *name*.

        Returns:
            The original class, unmodified.
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Look up a source class by name.

        Raises:
            KeyError: If nothing is registered under *name*.
        """
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown entropy source: {name!r}. Available: {available}") from None

    @classmethod
    def build(cls, name: str) -> EntropySource:
        """Instantiate the source registered under *name* with no arguments."""
        return cls.get(name)()

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered source names, sorted."""
        return sorted(cls._registry)

    @classmethod
    def _reset(cls) -> None:
        """Reset registry state. **Test-only** — not part of public API."""
        cls._registry.clear()


register_entropy_source = EntropySourceRegistry.register
