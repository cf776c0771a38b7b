"""Static category lists, classification order and drift checks."""

import pytest

from uma_openapi.models.enums import Category
from uma_openapi.schemas.categories import (
    CATEGORY_MEMBERS,
    CLASSIFICATION_ORDER,
    DEFAULT_CATEGORY,
    classify,
    find_drift,
    is_listed,
)
from uma_openapi.schemas.providers import DEFAULT_PROVIDERS


def test_every_category_has_a_list_and_a_priority():
    assert set(CATEGORY_MEMBERS) == set(Category)
    assert sorted(CLASSIFICATION_ORDER) == sorted(Category)
    assert len(CLASSIFICATION_ORDER) == len(set(CLASSIFICATION_ORDER))


def test_responses_checked_before_async_rate_limit_and_errors():
    order = list(CLASSIFICATION_ORDER)
    for later in (Category.ASYNC_OPERATIONS, Category.RATE_LIMITING, Category.ERRORS):
        assert order.index(Category.RESPONSES) < order.index(later)


def test_static_lists_do_not_overlap():
    seen: dict[str, Category] = {}
    for category, names in CATEGORY_MEMBERS.items():
        for name in names:
            assert name not in seen, f"{name} listed under {seen.get(name)} and {category}"
            seen[name] = category


@pytest.mark.parametrize(
    "name, expected",
    [
        ("StandardResponse", Category.COMMON),
        ("ContainerInfo", Category.DOCKER),
        ("UPSInfo", Category.SYSTEM),
        ("ZFSPoolInfo", Category.STORAGE),
        ("VMSnapshot", Category.VM),
        ("WebSocketEvent", Category.WEBSOCKET),
        ("LoginRequest", Category.AUTH),
        ("DiagnosticsRepair", Category.DIAGNOSTICS),
        ("NotificationInfo", Category.NOTIFICATIONS),
        ("OperationStats", Category.OPERATIONS),
        ("ParityCheckResponse", Category.RESPONSES),
        ("AsyncOperationRequest", Category.ASYNC_OPERATIONS),
        ("RateLimitConfigUpdate", Category.RATE_LIMITING),
        ("ConflictError", Category.ERRORS),
    ],
)
def test_classify_listed_names(name, expected):
    assert is_listed(name)
    assert classify(name) == expected


def test_unlisted_name_falls_back_to_default():
    assert DEFAULT_CATEGORY == Category.RESPONSES
    assert not is_listed("SomethingNew")
    assert classify("SomethingNew") == DEFAULT_CATEGORY


def test_classification_is_case_sensitive():
    assert classify("LoginRequest") == Category.AUTH
    assert not is_listed("loginrequest")


def test_find_drift_reports_disagreements_only():
    drift = find_drift({
        "LoginRequest": Category.DOCKER,
        "VMInfo": Category.VM,
        "Unlisted": Category.SYSTEM,
        "UserInfo": None,
    })
    assert drift == {"LoginRequest": (Category.DOCKER, Category.AUTH)}


def test_default_providers_agree_with_static_lists():
    declared = {}
    for group in DEFAULT_PROVIDERS:
        assert group.category is not None, group.name
        for name in group.provide():
            declared[name] = group.category
    assert find_drift(declared) == {}
