"""TopicAllocationPolicy — room-scoped availability and uniform random draw."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.errors import ExhaustedPool
from topic_picker.domain.value_objects.topic_pools import TOPIC_POOLS, pool_key


def available_topics(
    channel: str | Enum,
    category: str | Enum,
    room: int,
    assignments: Iterable[Assignment],
    pools: Mapping[str, Sequence[str]] = TOPIC_POOLS,
) -> list[str]:
    """Topics of the (channel, category) pool not yet used in *room*.

    1. Look up the pool by a case-insensitive key; unknown combinations
       yield an empty pool rather than an error.
    2. Collect every topic already assigned in *room*, whatever channel or
       category that assignment was made for.
    3. Return the pool in declaration order minus the used topics.

    Args:
        channel: channel name or ``Channel`` member.
        category: category name or ``Category`` member.
        room: room number to scope uniqueness to.
        assignments: current known assignments.
        pools: topic pools, defaults to the static configuration.

    Returns:
        Remaining topics, not shuffled.
    """
    pool = pools.get(pool_key(channel, category), ())
    used_in_room = {a.topic for a in assignments if a.room == room}
    return [topic for topic in pool if topic not in used_in_room]


def draw_topic(candidates: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one candidate uniformly at random.

    Raises:
        ExhaustedPool: if *candidates* is empty.
    """
    if not candidates:
        raise ExhaustedPool()
    return (rng or random).choice(list(candidates))
