"""Exception hierarchy for pwtool.

All exceptions derive from PwtoolError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class PwtoolError(Exception):
    """Base exception for all pwtool errors."""


class EntropyUnavailableError(PwtoolError):
    """The entropy source cannot provide bytes.

    Fatal for the current generation request. Never retried and never
    answered by switching to a weaker randomness source.
    """


class InvalidDomainError(PwtoolError, ValueError):
    """The sampler was asked for an index domain outside ``1..256``.

    Indicates an internal invariant violation: every alphabet the builder
    samples from must fit in a single byte domain.
    """


class InvalidLengthError(PwtoolError, ValueError):
    """Requested password length is below the minimum of 16."""


class ConfigValidationError(PwtoolError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields or when values fail pydantic
    validation (count below 1, length below 16, unknown log level).
    """


class ExportError(PwtoolError):
    """Writing passwords to an output file failed."""
