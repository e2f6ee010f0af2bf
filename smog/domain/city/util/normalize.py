"""City name normalization."""

import re
import unicodedata

from smog.domain.city.model.city import NormalizedKey

_WHITESPACE = re.compile(r"\s+")

# Spacing diacritics that survive NFD as standalone characters: the
# Spacing Modifier Letters block (ʻ ʼ ˆ ˜ ...) and the middle dot.
_SPACING_MODIFIERS = range(0x02B0, 0x0300)
_MIDDLE_DOT = "\u00b7"


def _is_diacritic(ch: str) -> bool:
    return (
        unicodedata.combining(ch) != 0
        or unicodedata.category(ch) == "Sk"
        or ord(ch) in _SPACING_MODIFIERS
        or ch == _MIDDLE_DOT
    )


def normalize_key(raw: str) -> NormalizedKey:
    """Return the canonical key for a free-text city name.

    Trims, strips diacritical marks, collapses whitespace runs and lowercases,
    so ``" São  Paulo "`` and ``"sao paulo"`` map to the same key. Spacing
    marks count as diacritics too: ``"Qoʻqon"`` becomes ``"qoqon"``.
    Idempotent.
    """
    # Lowercase before decomposing: some capitals lowercase to a base letter
    # plus a combining mark (e.g. "İ").
    decomposed = unicodedata.normalize("NFD", raw.strip().lower())
    stripped = "".join(ch for ch in decomposed if not _is_diacritic(ch))
    return _WHITESPACE.sub(" ", stripped).strip()
