"""Word counting for speech transcripts."""
from __future__ import annotations

_DELIMITERS = frozenset(",. ")


def count_words(text: str) -> int:
    """Count the word boundaries in ``text``.

    A boundary is a comma, period or space that follows at least one
    alphanumeric character. The run of non-alphanumeric characters after a
    boundary is consumed as a whole, so ``"Hello,  world."`` counts two
    boundaries rather than four. A trailing word without a closing delimiter
    is not counted.
    """

    count = 0
    position = 0
    length = len(text)
    seen_word = False
    while position < length:
        char = text[position]
        if char in _DELIMITERS and seen_word:
            count += 1
            seen_word = False
            position += 1
            while position < length and not text[position].isalnum():
                position += 1
            continue
        if char.isalnum():
            seen_word = True
        position += 1
    return count


__all__ = ["count_words"]
