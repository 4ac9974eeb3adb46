"""Term splitting: converts identifiers to sets of lowercase word-terms.

Handles camel-case word boundaries:
- lowerCamelCase (e.g. "keepPath" -> {"keep", "path"})
- UpperCamelCase (e.g. "KeepPath" -> {"keep", "path"})

Underscores already present in the identifier also act as boundaries, so
"keep_path" -> {"keep", "path"}.

Known limitation: upper-underscore constants are not recognised.  Every
uppercase letter starts a new word, so "MAX_VALUE" splits letter by letter
into {"m", "a", "x", "v", "l", "u", "e"} and acronyms do the same
("userID" -> {"user", "i", "d"}).  Callers depend on this output, keep it.
"""

from __future__ import annotations

import re
import string

__all__ = ["split_terms"]

_WORD_SEPARATOR = "_"

# Every ASCII uppercase letter starts a word; non-ASCII letters never do.
_WORD_START = re.compile(r"([A-Z])")

# Lowercases ASCII letters only, matching the boundary set above.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def split_terms(identifier: str) -> frozenset[str]:
    """Split an identifier into its set of lowercase word-terms.

    Processing pipeline (applied in order):
    1. Insert the word separator before every uppercase letter.
    2. Lowercase.
    3. Split on the separator, strip whitespace from each fragment.
    4. Drop empty fragments and deduplicate.

    Args:
        identifier: Raw argument or parameter name as written in source.

    Returns:
        Frozen set of non-empty lowercase terms.  Empty for ``""``.
    """
    marked = _WORD_START.sub(_WORD_SEPARATOR + r"\1", identifier)
    lowered = marked.translate(_ASCII_LOWER)
    fragments = (part.strip() for part in lowered.split(_WORD_SEPARATOR))
    return frozenset(part for part in fragments if part)
