"""Lexical similarity between argument and parameter names.

Similarity is the Dice coefficient over the two identifiers' term sets::

    2 * |terms(a) & terms(b)| / (|terms(a)| + |terms(b)|)

Term sets discard order and multiplicity, so "fooBar" and "barFoo" score
1.0 even though they name different things.  This false positive is an
accepted weakness of the heuristic.

When neither identifier yields any term the denominator is zero and the
configured ``SimilarityConfig.empty_score`` (0.0 by default) is returned.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from argname_similarity.config import SimilarityConfig
from argname_similarity.terms import split_terms

__all__ = ["lexical_similarity", "similarities", "similarity_matrix"]

_DEFAULT_CONFIG = SimilarityConfig()


def lexical_similarity(
    arg: str,
    param: str,
    config: SimilarityConfig | None = None,
) -> float:
    """Compute the term-set Dice coefficient of two identifiers.

    Args:
        arg:    Argument name at the call site.
        param:  Parameter name in the callee's signature.
        config: Scoring parameters.  Defaults to ``SimilarityConfig()``.

    Returns:
        Float in [0.0, 1.0], symmetric in ``arg`` and ``param``.  1.0 means
        identical term sets, 0.0 means no shared term.
    """
    arg_terms = split_terms(arg)
    param_terms = split_terms(param)

    total_terms = len(arg_terms) + len(param_terms)
    if total_terms == 0:
        return (config or _DEFAULT_CONFIG).empty_score

    common_terms = len(arg_terms & param_terms) * 2
    return common_terms / total_terms


def similarities(
    arg: str,
    params: Sequence[str],
    config: SimilarityConfig | None = None,
) -> list[float]:
    """Return the similarity of ``arg`` to each parameter, in parameter order.

    Element ``i`` is ``lexical_similarity(arg, params[i], config)``.  An empty
    ``params`` yields an empty list.
    """
    return [lexical_similarity(arg, param, config) for param in params]


def similarity_matrix(
    args: Sequence[str],
    params: Sequence[str],
    config: SimilarityConfig | None = None,
) -> np.ndarray:
    """Build the argument/parameter score matrix for one call site.

    Row ``i`` scores every argument against ``params[i]``, so a row is a valid
    ``scores`` input for ``best_arg_for_param`` alongside ``args``.

    Args:
        args:   Argument names in call-site order.
        params: Parameter names in declaration order.
        config: Scoring parameters.  Defaults to ``SimilarityConfig()``.

    Returns:
        ``float64`` array of shape ``(len(params), len(args))`` where
        ``matrix[i, j] == lexical_similarity(args[j], params[i])``.
    """
    rows = [
        [lexical_similarity(arg, param, config) for arg in args] for param in params
    ]
    return np.array(rows, dtype=np.float64).reshape(len(params), len(args))
