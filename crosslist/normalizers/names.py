"""Given-name extraction from decorated profile display names."""


def _keep(char: str) -> bool:
    # letters, decimal digits, whitespace
    return char.isalpha() or char.isdecimal() or char.isspace()


def strip_decorations(raw: str | None) -> str:
    """Remove every character that is not a letter, a decimal digit or whitespace.

    Emoji, punctuation, symbols and underscores all go. Unicode letters are
    kept as they are, accents included.
    """
    if not raw:
        return ""
    return "".join(c for c in raw if _keep(c)).strip()


def normalize_display_name(raw: str | None) -> str:
    """Reduce a display name to its first token.

    >>> normalize_display_name("João 🔥 Silva")
    'João'
    >>> normalize_display_name("🎉🎉🎉")
    ''

    Never raises; normalizing an already normalized name returns it unchanged.
    """
    tokens = strip_decorations(raw).split()
    if not tokens:
        return ""
    return tokens[0]
