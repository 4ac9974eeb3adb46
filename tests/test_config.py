"""Tests for the SimilarityConfig frozen dataclass.

Covers:
- Default values (empty_score=0.0)
- Custom construction at both bounds
- Immutability (FrozenInstanceError on assignment)
- Validation: empty_score must be in [0, 1]
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from argname_similarity.config import SimilarityConfig


class TestDefaults:
    def test_default_empty_score(self) -> None:
        assert SimilarityConfig().empty_score == 0.0

    def test_defaults_compare_equal(self) -> None:
        assert SimilarityConfig() == SimilarityConfig()


class TestCustomValues:
    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
    def test_accepts_values_in_range(self, value: float) -> None:
        assert SimilarityConfig(empty_score=value).empty_score == value


class TestImmutability:
    def test_assignment_raises(self) -> None:
        config = SimilarityConfig()
        with pytest.raises(FrozenInstanceError):
            config.empty_score = 1.0  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        assert hash(SimilarityConfig()) == hash(SimilarityConfig())


class TestValidation:
    @pytest.mark.parametrize("value", [-0.1, 1.5, float("nan")])
    def test_rejects_out_of_range(self, value: float) -> None:
        with pytest.raises(ValueError, match="empty_score"):
            SimilarityConfig(empty_score=value)
