"""Topic pool endpoints — static pools and per-room availability."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from topic_picker.application.services.assignment_cache import AssignmentCache
from topic_picker.domain.policies.topic_allocation import available_topics
from topic_picker.domain.value_objects.enums import Category, Channel
from topic_picker.domain.value_objects.topic_pools import ROOMS, TOPIC_POOLS
from topic_picker.infrastructure.api.dependencies import get_cache

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("/pools")
async def list_pools():
    return {
        "channels": [c.value for c in Channel],
        "categories": [c.value for c in Category],
        "rooms": list(ROOMS),
        "pools": {key: list(topics) for key, topics in TOPIC_POOLS.items()},
    }


@router.get("/available")
async def list_available(
    channel: Channel,
    category: Category,
    room: int = Query(..., ge=min(ROOMS), le=max(ROOMS)),
    cache: AssignmentCache = Depends(get_cache),
):
    """Topics still free for the channel/category in a room."""
    topics = available_topics(channel, category, room, await cache.refresh())
    return {
        "channel": channel.value,
        "category": category.value,
        "room": room,
        "available": topics,
        "count": len(topics),
    }
