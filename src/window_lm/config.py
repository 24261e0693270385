"""
Configuration for the window language model.

Holds the model settings (window length, random seed) together with the
defaults the command line uses for corpus reading and generation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .exceptions import InvalidConfigurationError


def validate_window_length(window_length) -> int:
    # bool is an int subclass but never a meaningful window length
    if isinstance(window_length, bool) or not isinstance(window_length, int):
        raise InvalidConfigurationError(
            f"window_length must be an integer, got {window_length!r}"
        )
    if window_length <= 0:
        raise InvalidConfigurationError(
            f"window_length must be >= 1, got {window_length}"
        )
    return window_length


@dataclass(frozen=True)
class ModelConfig:
    """
    Settings for training and sampling a model.

    Attributes:
        window_length: Number of preceding characters used as context
        seed: Random seed; None gives nondeterministic generation
        encoding: Encoding used when reading corpus files
        initial_text: Seed text generation starts from
        text_length: Target length of the generated text
    """

    window_length: int = 3
    seed: int | None = None
    encoding: str = "utf-8"
    initial_text: str = ""
    text_length: int = 100

    def __post_init__(self):
        validate_window_length(self.window_length)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfigurationError(f"seed must be an integer or None, got {self.seed!r}")
        if isinstance(self.text_length, bool) or not isinstance(self.text_length, int) or self.text_length < 0:
            raise InvalidConfigurationError(
                f"text_length must be a non-negative integer, got {self.text_length!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ModelConfig":
        """Create a ModelConfig from a dictionary, ignoring unknown keys."""
        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(
                f"configuration must be a JSON object, got {type(config_dict).__name__}"
            )
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
