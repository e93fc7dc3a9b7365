"""Identifier case conversion.

Asset names are written in PascalCase (they double as Elm variant names);
record fields derived from them must start lowercase.
"""

import re

# Chunks of letters/digits separated by anything else
_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")

# Acronym before a capitalized word, capitalized word, lone acronym, digit run
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(value: str) -> list[str]:
    """Split a name into its words.

    Example:
        "MainMenuBgSound" -> ["Main", "Menu", "Bg", "Sound"]
        "zombie_10" -> ["zombie", "10"]
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(value):
        words.extend(_WORD.findall(chunk))
    return words


def to_camel_case(value: str) -> str:
    """Convert a human-readable name to a camelCase identifier.

    Total over all strings: an input without letters or digits yields "".

    Examples:
        "ZombieDie" -> "zombieDie"
        "Zombie10" -> "zombie10"
        "HTMLParser" -> "htmlParser"
        "level_failed" -> "levelFailed"
    """
    words = split_words(value)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[0].upper() + word[1:].lower() for word in rest)
