"""Helpers that materialize traversals into in-memory collections."""

import logging
from typing import Dict, Iterable, List, Optional, Tuple, TypeVar

import pandas as pd
import pyarrow as pa

from .cursor import Source
from .pairwise import pairwise
from .stack import Stack

T = TypeVar("T")

logger = logging.getLogger(__name__)

PAIR_COLUMNS = ["current", "next"]


def to_list(values: Iterable[T]) -> List[T]:
    """Collect a traversal into a list."""
    return list(values)


def collect_pairs(source: Source) -> List[Tuple[T, T]]:
    """Collect every adjacent pair of ``source`` into a list."""
    with pairwise(source) as pairs:
        return list(pairs)


def pairs_to_dict(pairs: Iterable[Tuple[T, T]]) -> Dict[T, T]:
    """
    Map each element to its successor.

    Args:
        pairs: Adjacent pairs, for example from ``pairwise(stack)``

    Returns:
        Dictionary of ``current -> next``; a repeated key keeps its last successor
    """
    return {current: following for current, following in pairs}


def to_series(stack: Stack[T], name: Optional[str] = None) -> pd.Series:
    """
    Convert a stack to a pandas Series, bottom element first.

    Args:
        stack: Stack to read
        name: Series name

    Returns:
        Series indexed by stack position (0 is the bottom)
    """
    values = list(stack.all())
    series = pd.Series(values, name=name, dtype=None if values else object)
    logger.debug(f"Built Series with {len(series)} elements")
    return series


def pairs_to_frame(source: Source) -> pd.DataFrame:
    """
    Convert adjacent pairs to a DataFrame with ``current`` and ``next`` columns.

    Args:
        source: Anything accepted by ``pairwise``

    Returns:
        One row per pair, in traversal order
    """
    df = pd.DataFrame(collect_pairs(source), columns=PAIR_COLUMNS)
    logger.debug(f"Built DataFrame with {len(df)} pairs")
    return df


def to_arrow(stack: Stack[T]) -> pa.Array:
    """Convert a stack to a pyarrow Array, bottom element first."""
    return pa.array(list(stack.all()))


def pairs_to_table(source: Source) -> pa.Table:
    """
    Convert adjacent pairs to a pyarrow Table.

    Args:
        source: Anything accepted by ``pairwise``

    Returns:
        Table with ``current`` and ``next`` columns
    """
    pairs = collect_pairs(source)
    return pa.table(
        {
            "current": pa.array([current for current, _ in pairs]),
            "next": pa.array([following for _, following in pairs]),
        }
    )
