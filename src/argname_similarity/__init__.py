"""Argname similarity - lexical matching of call-site arguments to parameters."""

from __future__ import annotations

import logging

from argname_similarity.config import SimilarityConfig
from argname_similarity.constants import RESERVED_TERMS, is_generic
from argname_similarity.ranking import best_arg_for_param, best_args_for_params
from argname_similarity.scoring import (
    lexical_similarity,
    similarities,
    similarity_matrix,
)
from argname_similarity.terms import split_terms

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "RESERVED_TERMS",
    "SimilarityConfig",
    "best_arg_for_param",
    "best_args_for_params",
    "is_generic",
    "lexical_similarity",
    "similarities",
    "similarity_matrix",
    "split_terms",
]
