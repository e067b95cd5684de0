"""Priority-list evaluation for fallback extraction strategies."""

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from ..models import Provenance

logger = logging.getLogger("feedscan")

Strategy = Tuple[str, Callable[..., Any]]


def first_success(
    field: str,
    strategies: Sequence[Strategy],
    *args: Any,
    start_rank: int = 1,
) -> Tuple[Optional[Any], Optional[Provenance]]:
    """Run strategies in order and return the first non-empty result.

    A strategy that raises counts as a miss; the next one is tried.

    Args:
        field: Field name recorded in the provenance.
        strategies: (name, callable) pairs in priority order.
        *args: Passed to every strategy.
        start_rank: Rank given to the first strategy.

    Returns:
        (value, provenance), or (None, None) when every strategy misses.
    """
    for rank, (name, strategy) in enumerate(strategies, start=start_rank):
        try:
            value = strategy(*args)
        except Exception as e:
            logger.debug(f"{field} strategy {rank} ({name}) failed: {e}")
            continue
        if value:
            return value, Provenance(field=field, strategy=name, rank=rank)
    return None, None
