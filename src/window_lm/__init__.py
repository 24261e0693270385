"""Character-level sliding-window language model.

Train a ``LanguageModel`` on a corpus, then sample new text from it.
"""

from .config import ModelConfig
from .exceptions import EmptyDistributionError, InvalidConfigurationError, WindowModelError
from .frequency import EntryList, FrequencyEntry
from .model import LanguageModel
from .sources import CharacterSource
from .text_cleaning import CleanTextConfig, clean_text
from .window_table import WindowTable

__version__ = "0.1.0"

__all__ = [
    "CharacterSource",
    "CleanTextConfig",
    "EmptyDistributionError",
    "EntryList",
    "FrequencyEntry",
    "InvalidConfigurationError",
    "LanguageModel",
    "ModelConfig",
    "WindowModelError",
    "WindowTable",
    "clean_text",
]
