"""
Error types raised before a simulation enters its integration loop.

All of them subclass ``ValueError`` so callers that only care about
"bad input" can catch that.
"""


class BallisticsError(ValueError):
    """Base class for rejected simulation inputs."""


class InvalidWeight(BallisticsError):
    """BB weight (or comparison override) is not a positive finite number."""


class InvalidVelocity(BallisticsError):
    """Muzzle velocity resolves to zero, a negative or a non-finite speed."""


class DegenerateEnvironment(BallisticsError):
    """Air density or spin rate came out non-finite or non-positive."""
