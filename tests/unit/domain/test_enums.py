"""Tests for domain enums and static pools."""

from topic_picker.domain.value_objects.enums import (
    AssignmentStatus,
    Category,
    Channel,
    StoreBackend,
    plain_value,
)
from topic_picker.domain.value_objects.topic_pools import ROOMS, TOPIC_POOLS, pool_key


def test_channel_values():
    assert Channel.BANCA.value == "Banca"
    assert Channel.RETAIL.value == "Retail"


def test_category_values():
    assert Category.ROOKIE.value == "Rookie"
    assert Category.VINTAGE.value == "Vintage"


def test_status_values():
    assert {s.value for s in AssignmentStatus} == {"created", "existing", "recovered"}


def test_store_backend_values():
    assert StoreBackend("sql") is StoreBackend.SQL


def test_rooms():
    assert ROOMS == (1, 2, 3)


def test_four_pools_of_ten():
    assert set(TOPIC_POOLS) == {"banca_rookie", "banca_vintage", "retail_rookie", "retail_vintage"}
    assert all(len(topics) == 10 for topics in TOPIC_POOLS.values())


def test_pools_are_disjoint():
    all_topics = [t for topics in TOPIC_POOLS.values() for t in topics]
    assert len(all_topics) == len(set(all_topics))


def test_pool_key_from_enums_and_strings():
    assert pool_key(Channel.RETAIL, Category.ROOKIE) == "retail_rookie"
    assert pool_key("Banca", "VINTAGE") == "banca_vintage"


def test_plain_value_unwraps_members_and_passes_other_values():
    assert plain_value(Channel.RETAIL) == "Retail"
    assert plain_value("Banca") == "Banca"
    assert plain_value(2) == "2"
