"""Static topic pools keyed by channel + category."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from topic_picker.domain.value_objects.enums import plain_value

ROOMS: tuple[int, ...] = (1, 2, 3)

TOPIC_POOLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "banca_rookie": (
        "Customer Service Excellence",
        "Banking Regulations",
        "Digital Banking Fundamentals",
        "Sales Techniques",
        "Risk Management Basics",
        "Customer Onboarding Process",
        "Financial Literacy",
        "Product Knowledge",
        "Compliance Training",
        "Communication Skills",
    ),
    "banca_vintage": (
        "Advanced Banking Products",
        "Market Analysis",
        "Investment Advisory",
        "Regulatory Compliance",
        "Leadership Skills",
        "Strategic Planning",
        "Advanced Risk Assessment",
        "Portfolio Management",
        "Customer Retention",
        "Digital Transformation",
    ),
    "retail_rookie": (
        "Retail Sales Basics",
        "Customer Interaction",
        "POS Systems",
        "Inventory Management",
        "Visual Merchandising",
        "Cash Handling",
        "Product Presentation",
        "Store Operations",
        "Customer Complaints",
        "Team Collaboration",
    ),
    "retail_vintage": (
        "Advanced Retail Strategies",
        "Team Leadership",
        "Profit Optimization",
        "Customer Analytics",
        "Store Management",
        "Supply Chain Basics",
        "Performance Metrics",
        "Training & Development",
        "Quality Assurance",
        "Innovation in Retail",
    ),
})


def pool_key(channel: str | Enum, category: str | Enum) -> str:
    """Build the lookup key, e.g. ``(Channel.BANCA, "ROOKIE")`` → ``"banca_rookie"``."""
    return f"{_key_part(channel)}_{_key_part(category)}"


def _key_part(value: str | Enum) -> str:
    return plain_value(value).strip().lower()
