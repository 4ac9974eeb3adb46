"""Best-argument selection from precomputed similarity scores.

Selection is a leftmost arg-max: the first index holding the maximum score
wins.  When several arguments tie at the maximum (e.g. ``[0.5, 0.5, 0.5]``)
the pick is an arbitrary tie-break, not a meaningful match; callers that care
should inspect the scores themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

__all__ = ["best_arg_for_param", "best_args_for_params"]

logger = logging.getLogger(__name__)


def best_arg_for_param(
    scores: Sequence[float] | np.ndarray,
    args: Sequence[str],
) -> str:
    """Return the argument whose score against a parameter is highest.

    Args:
        scores: ``scores[j]`` is the similarity of ``args[j]`` to the
            parameter under consideration.  The caller owns this alignment.
        args:   Argument names in call-site order.

    Returns:
        ``args[k]`` for the lowest ``k`` such that ``scores[k]`` is maximal.

    Raises:
        ValueError: If ``scores`` or ``args`` is empty, or their lengths differ.
    """
    if len(scores) == 0 or len(args) == 0:
        msg = (
            "scores and args must be non-empty, "
            f"got {len(scores)} scores and {len(args)} args"
        )
        raise ValueError(msg)
    if len(scores) != len(args):
        msg = (
            "scores and args must have equal length, "
            f"got {len(scores)} and {len(args)}"
        )
        raise ValueError(msg)

    values = np.asarray(scores, dtype=float)
    # Running max moves only on a strict increase; NaN never displaces it.
    max_index = 0
    for i in range(1, len(values)):
        if values[max_index] < values[i]:
            max_index = i

    tied = int(np.count_nonzero(values == values[max_index]))
    if tied > 1:
        logger.debug(
            "%d arguments tie at score %.3f; picking %r at index %d",
            tied,
            values[max_index],
            args[max_index],
            max_index,
        )

    return args[max_index]


def best_args_for_params(
    matrix: np.ndarray | Sequence[Sequence[float]],
    args: Sequence[str],
) -> list[str]:
    """Select the best argument for every parameter of a score matrix.

    Args:
        matrix: 2-D array of shape ``(n_params, len(args))`` as built by
            ``similarity_matrix``.
        args:   Argument names in call-site order.

    Returns:
        One argument name per matrix row, in row order.  Empty for a matrix
        with no rows.

    Raises:
        ValueError: If ``matrix`` is not 2-D or its column count differs
            from ``len(args)``.
    """
    scores = np.asarray(matrix, dtype=float)
    if scores.ndim != 2:
        msg = f"matrix must be 2-D, got {scores.ndim} dimension(s)"
        raise ValueError(msg)
    if scores.shape[1] != len(args):
        msg = f"matrix has {scores.shape[1]} columns but {len(args)} args were given"
        raise ValueError(msg)

    return [best_arg_for_param(row, args) for row in scores]
