from __future__ import annotations


class WindowModelError(Exception):
    """Base class for errors raised by the window language model."""


class InvalidConfigurationError(WindowModelError, ValueError):
    """Raised when a model is configured with unusable settings."""


class EmptyDistributionError(WindowModelError, RuntimeError):
    """Raised when a follow-character distribution has no observations.

    Training only creates an entry list together with its first count, so
    seeing this means the table was built or mutated outside the trainer.
    """
