from collections import Counter
from decimal import Decimal
from operator import attrgetter
from typing import Callable, Dict, Hashable, Iterable

import structlog

from core.util import round_half_up
from points.rules import PointsRule

logger = structlog.get_logger(__name__)


def tie_group_points(rule: PointsRule, position: int, group_size: int, field_size: int) -> int:
    """
    Points for each member of a group tied at position.

    Every member gets the rounded average of what the consecutive places
    position .. position + group_size - 1 would have earned on their own.
    """
    scaled = [rule.scaled_points(place, field_size) for place in range(position, position + group_size)]
    average = sum(scaled, Decimal(0)) / group_size
    return int(round_half_up(average))


def allocate(ranked: Iterable, rule: PointsRule, field_size: int,
             key: Callable = attrgetter("participant_id")) -> Dict[Hashable, int]:
    """
    Convert ranked positions into points.

    Args:
        ranked: Entries exposing a position attribute
        rule: The points rule of the competition
        field_size: Number of players the default formula counts
        key: Extracts the id each entry's points are keyed by

    Returns:
        Dict of entry id -> points. Empty when nothing was ranked.
    """
    entries = list(ranked)
    group_sizes = Counter(entry.position for entry in entries)
    group_points = {
        position: tie_group_points(rule, position, size, field_size)
        for position, size in group_sizes.items()
    }

    tied_groups = sum(1 for size in group_sizes.values() if size > 1)
    if tied_groups:
        logger.debug("Averaged points for tied positions", tied_groups=tied_groups, field_size=field_size)

    return {key(entry): group_points[entry.position] for entry in entries}
