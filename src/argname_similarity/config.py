"""SimilarityConfig for lexical similarity scoring.

SimilarityConfig is a frozen (immutable) dataclass holding the scoring
parameters.  It is shared read-only; a fresh default is cheap to build.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SimilarityConfig"]


@dataclass(frozen=True, slots=True)
class SimilarityConfig:
    """Immutable configuration for lexical similarity scoring.

    Attributes:
        empty_score: Score returned when neither identifier yields any term
            (e.g. ``lexical_similarity("", "")``), where the Dice
            coefficient has a zero denominator.  Must be in [0, 1].
            Default 0.0.
    """

    empty_score: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.empty_score <= 1.0:
            msg = f"empty_score must be in [0, 1], got {self.empty_score}"
            raise ValueError(msg)
