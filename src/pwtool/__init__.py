"""pwtool: cryptographically strong password generation.

Builds passwords from an OS CSPRNG through a rejection-sampled, modulo-bias
free index sampler and a secure Fisher–Yates shuffle, guaranteeing at least
two characters from every active character class.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pwtool")
except PackageNotFoundError:
    __version__ = "0.0.0"

from pwtool.builder import PasswordBuilder
from pwtool.charset import CharacterClass, ClassSet
from pwtool.config import PwtoolConfig, load_config, resolve_config
from pwtool.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    ExportError,
    InvalidDomainError,
    InvalidLengthError,
    PwtoolError,
)
from pwtool.generator import PasswordGenerator
from pwtool.sampling import UniformSampler

__all__ = [
    "CharacterClass",
    "ClassSet",
    "ConfigValidationError",
    "EntropyUnavailableError",
    "ExportError",
    "InvalidDomainError",
    "InvalidLengthError",
    "PasswordBuilder",
    "PasswordGenerator",
    "PwtoolConfig",
    "PwtoolError",
    "UniformSampler",
    "__version__",
    "load_config",
    "resolve_config",
]
