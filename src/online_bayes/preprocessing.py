"""Turn raw text into feature lists for the classifier.

Features are whitespace-separated tokens. Case is preserved unless asked
otherwise, so ``"I"`` and ``"i"`` are distinct features by default.
"""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


class Tokenizer:
    """Split text into feature tokens.

    Example::

        tokenizer = Tokenizer(lowercase=True)
        tokenizer.tokenize("Today  is a\\tSunny day")
        # ["today", "is", "a", "sunny", "day"]
    """

    def __init__(
        self,
        lowercase: bool = False,
        normalize_unicode: bool = True,
    ) -> None:
        """Initialize the tokenizer.

        Args:
            lowercase: Lowercase every token.
            normalize_unicode: Apply NFC Unicode normalization first, so
                composed and decomposed spellings map to the same feature.
        """
        self.lowercase = lowercase
        self.normalize_unicode = normalize_unicode

    def tokenize(self, text: str) -> list[str]:
        """Split ``text`` on runs of whitespace, dropping empty tokens."""
        if not text:
            return []
        if self.normalize_unicode:
            text = unicodedata.normalize("NFC", text)
        tokens = [t for t in _WHITESPACE_RE.split(text) if t]
        if self.lowercase:
            tokens = [t.lower() for t in tokens]
        return tokens
