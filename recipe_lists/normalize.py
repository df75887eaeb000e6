import re
import unicodedata

# Characters dropped from names before they are turned into slugs
REMOVED_CHARS = "*+~.()'\"!:@"

# Symbols spelled out as words: symbol -> word
SYMBOL_WORDS = {
    "&": "and",
    "|": "or",
    "<": "less",
    ">": "greater",
    "$": "dollar",
    "%": "percent",
}

_REMOVE_RE = re.compile("[" + re.escape(REMOVED_CHARS) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def _fold_accents(s: str) -> str:
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(s: str) -> str:
    """Return the URL-safe slug for a display name.

    ``"Chicken Curry!"`` becomes ``"chicken-curry"`` and
    ``"Leek & Potato Soup"`` becomes ``"leek-and-potato-soup"``. Hyphens
    already in the input count as separators, so slugifying a slug
    returns it unchanged.
    """
    if not s:
        return ""
    w = _fold_accents(s)
    w = _REMOVE_RE.sub("", w)
    for symbol, word in SYMBOL_WORDS.items():
        w = w.replace(symbol, f" {word} ")
    w = w.replace("-", " ").strip()
    w = _WHITESPACE_RE.sub("-", w)
    return w.lower()
