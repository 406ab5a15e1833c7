"""
Bolt Size / Count Search

Brute-force search over a discrete grid of bolt sizes and bolt counts for
the feasible configuration with the smallest required bolt load.

A grid cell is feasible when its bolt pitch lies within the spacing bounds
and the available bolt load at design temperature covers max(Wm1, Wm2).
Every cell is sized on automatic geometry: the BCD, flange OD and seating
ID / OD overrides are cleared before evaluation.

Cells are independent, so they may be evaluated on a thread pool. Results
are always reduced in grid order (sizes in table order, counts ascending)
and only a strictly smaller load replaces the current best, so the earliest
cell wins a tie regardless of how the grid was evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .calculator import CalculationResult, DesignInput, calculate
from .tables import ReferenceTables, default_tables

logger = logging.getLogger(__name__)

MIN_SEARCH_BOLT_SIZE = 0.75  # inches, smallest size tried in a full search
BOLT_COUNTS: tuple[int, ...] = tuple(range(4, 81, 4))


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a bolt search.

    Attributes:
        found: True when at least one feasible cell exists
        bolt_size: Winning size (input size when nothing was found)
        bolt_count: Winning count (input count when nothing was found)
        required_load: max(Wm1, Wm2) of the winner (N), inf when not found
        margin: Design margin of the winner (%), 0 when not found
        evaluated: Number of grid cells evaluated
        design: Input with the winning bolting and geometry overrides
            cleared, or the unchanged input when nothing was found
    """

    found: bool
    bolt_size: float
    bolt_count: int
    required_load: float
    margin: float
    evaluated: int
    design: DesignInput


def is_feasible(result: CalculationResult) -> bool:
    """Spacing within bounds and available load covering the required load."""
    return result.spacing_ok and result.available_load >= result.required_load


def search_grid(
    design: DesignInput,
    fixed_size: bool,
    tables: ReferenceTables,
) -> list[tuple[float, int]]:
    """(size, count) cells in evaluation order."""
    if fixed_size:
        sizes = [design.bolt_size]
    else:
        sizes = tables.bolt_sizes(MIN_SEARCH_BOLT_SIZE)
    return [(size, count) for size in sizes for count in BOLT_COUNTS]


def _evaluate(
    design: DesignInput,
    cells: Iterable[tuple[float, int]],
    tables: ReferenceTables,
    max_workers: int | None,
) -> Iterator[CalculationResult]:
    candidates = [design.with_bolting(size, count) for size, count in cells]
    if max_workers is None or max_workers <= 1:
        return (calculate(candidate, tables) for candidate in candidates)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # map() yields in submission order
        return iter(list(pool.map(lambda c: calculate(c, tables), candidates)))


def search(
    design: DesignInput,
    fixed_size: bool = False,
    tables: ReferenceTables | None = None,
    max_workers: int | None = None,
) -> SearchResult:
    """
    Find the bolt size and count with the smallest required load.

    Args:
        design: Starting design input (not modified)
        fixed_size: Only vary the bolt count, keeping the current size
        tables: Reference tables (default: ``default_tables()``)
        max_workers: Evaluate grid cells on a thread pool of this size

    Returns:
        SearchResult. When no feasible cell exists ``found`` is False and
        ``design`` is the input unchanged.
    """
    if tables is None:
        tables = default_tables()

    cells = search_grid(design, fixed_size, tables)
    best: tuple[float, int] | None = None
    best_load = float("inf")
    best_margin = 0.0

    for (size, count), result in zip(cells, _evaluate(design, cells, tables, max_workers)):
        if not is_feasible(result):
            continue
        if result.required_load < best_load:
            best = (size, count)
            best_load = result.required_load
            best_margin = result.margin_percent

    if best is None:
        logger.info(
            "No feasible bolting found (%s search, %d cells)",
            "fixed size" if fixed_size else "full",
            len(cells),
        )
        return SearchResult(
            found=False,
            bolt_size=design.bolt_size,
            bolt_count=design.bolt_count,
            required_load=float("inf"),
            margin=0.0,
            evaluated=len(cells),
            design=design,
        )

    size, count = best
    logger.info(
        "Best bolting %s x %d: required load %.1f kN, margin %+.2f%%",
        size,
        count,
        best_load / 1000,
        best_margin,
    )
    return SearchResult(
        found=True,
        bolt_size=size,
        bolt_count=count,
        required_load=best_load,
        margin=best_margin,
        evaluated=len(cells),
        design=design.with_bolting(size, count),
    )
