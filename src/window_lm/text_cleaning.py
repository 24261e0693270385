from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"\s+")
_INLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")


@dataclass(frozen=True)
class CleanTextConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_urls: bool = False
    remove_emails: bool = False
    remove_control_chars: bool = True
    keep_newlines: bool = True
    normalize_whitespace: bool = False


def clean_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Optional normalization of a training corpus before counting characters.

    The defaults only drop control characters, so the model still sees the
    corpus' own casing, punctuation and line breaks.
    """

    cfg = config or CleanTextConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.remove_urls:
        s = re.sub(r"https?://\S+|www\.\S+", " ", s)

    if cfg.remove_emails:
        s = re.sub(r"\b\S+@\S+\.\S+\b", " ", s)

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.remove_control_chars:
        if cfg.keep_newlines:
            s = re.sub(r"[\x00-\x09\x0B-\x1F\x7F]", " ", s.replace("\r\n", "\n"))
        else:
            s = re.sub(r"[\x00-\x1F\x7F]", " ", s)

    if cfg.normalize_whitespace:
        if cfg.keep_newlines:
            s = _INLINE_WHITESPACE_RE.sub(" ", s).strip()
        else:
            s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
