"""Sampling subsystem for pwtool.

Rejection-sampled uniform indices and Fisher–Yates shuffling driven by an
explicit entropy source.
"""

from pwtool.sampling.sampler import BYTE_DOMAIN, UniformSampler, rejection_limit

__all__ = [
    "BYTE_DOMAIN",
    "UniformSampler",
    "rejection_limit",
]
