"""String normalisation utilities used to derive generated identifiers."""

from __future__ import annotations

import re

__all__ = ["DEFAULT_IDENTIFIER", "label_case", "sanitize_identifier", "title_case"]


DEFAULT_IDENTIFIER = "mydashboard"

_WORD_SEPARATORS = re.compile(r"[-_]")


def _is_identifier_char(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == "_"


def _is_label_separator(char: str) -> bool:
    # ASCII punctuation and any whitespace end a word; other non-ASCII
    # characters, punctuation included, belong to the word.
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdecimal():
        return False
    return char.isspace()


def _single_char(converted: str, original: str) -> str:
    # Multi-character case mappings (``"ß".upper() == "SS"``) leave the
    # character untouched.
    return converted if len(converted) == 1 else original


def sanitize_identifier(text: str) -> str:
    """Return a lowercase, underscore delimited identifier derived from ``text``.

    Case folding happens first, then every space becomes an underscore and
    any character that is not a letter, digit or underscore is deleted. Hyphens
    are therefore dropped rather than converted (``"To-Do List"`` becomes
    ``"todo_list"``). When nothing survives, :data:`DEFAULT_IDENTIFIER` is
    returned so the result is never empty.
    """

    lowered = text.lower().replace(" ", "_")
    candidate = "".join(char for char in lowered if _is_identifier_char(char))
    return candidate or DEFAULT_IDENTIFIER


def title_case(text: str) -> str:
    """Return an UpperCamelCase fragment built from the words in ``text``.

    Hyphens and underscores count as word separators. Only the first character
    of each word is upper-cased; the remainder is preserved as typed. Unlike
    :func:`sanitize_identifier` there is no fallback, so input without words
    yields an empty string.
    """

    words = _WORD_SEPARATORS.sub(" ", text).split()
    return "".join(_single_char(word[0].upper(), word[0]) + word[1:] for word in words)


def label_case(text: str) -> str:
    """Lower-case ``text`` and title-case the first character of every word.

    Words are separated by whitespace and ASCII punctuation, so ``"to-do LIST"``
    becomes ``"To-Do List"`` and ``"1st place"`` becomes ``"1st Place"``, while
    ``"a·b"`` stays one word.
    """

    result = []
    previous = " "
    for char in text.lower():
        if _is_label_separator(previous):
            char = _single_char(char.title(), char)
        result.append(char)
        previous = char
    return "".join(result)
