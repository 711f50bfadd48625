"""Slug generation for human-readable titles."""
import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str | None, separator: str = "-") -> str:
    """Convert ``text`` into a lowercase, URL-safe token.

    Accented latin letters are reduced to their ASCII base letter, any other
    non-ASCII character is dropped, apostrophes are removed so that
    possessives stay in one word, ``&`` becomes "and", and every remaining
    run of characters outside ``[a-z0-9]`` collapses into a single
    ``separator``.

    Empty input, ``None``, or input with no alphanumeric characters yields
    ``""``.

    Examples:
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("Crème brûlée's secret")
        'creme-brulees-secret'
        >>> slugify("Tom & Jerry")
        'tom-and-jerry'
        >>> slugify("  ...  ")
        ''
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower().replace("'", "")
    text = text.replace("&", "and")
    text = _NON_ALNUM.sub(separator, text)
    return text.strip(separator)
