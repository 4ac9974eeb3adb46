"""Generic, low-information identifier terms.

``RESERVED_TERMS`` is exposed for callers that want to deprioritise matches
on generic names such as ``value`` or ``key``.  Scoring never consults it.
"""

from __future__ import annotations

from argname_similarity.terms import split_terms

__all__ = ["RESERVED_TERMS", "is_generic"]

RESERVED_TERMS: tuple[str, ...] = (
    "message",
    "counter",
    "index",
    "object",
    "value",
    "item",
    "key",
)

_RESERVED = frozenset(RESERVED_TERMS)


def is_generic(identifier: str) -> bool:
    """Return True if every term of ``identifier`` is a reserved term.

    Identifiers without any term (e.g. ``""``) are not generic.
    """
    terms = split_terms(identifier)
    return bool(terms) and terms <= _RESERVED
