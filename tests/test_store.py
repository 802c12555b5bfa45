"""Tests for the menu store."""

import math

import pytest

from chef_menu.errors import MenuValidationError, ValidationReason
from chef_menu.models import CHANGE_ADDED, CHANGE_REMOVED, Course, CourseFilter, StoreChange
from chef_menu.rendering import format_summary
from chef_menu.store import MAX_PRICE, MenuStore, parse_price, round_cents
from tests.conftest import candidate


def test_add_trims_fields_and_rounds_price(store: MenuStore) -> None:
    entry = store.add(candidate("  Lemon Chicken ", "120.456", Course.MAIN, description="  zesty  "))

    assert entry.name == "Lemon Chicken"
    assert entry.description == "zesty"
    assert entry.course is Course.MAIN
    assert entry.price == 120.46
    assert store.list() == [entry]


@pytest.mark.parametrize(
    ("price_text", "expected"),
    [("10", 10.0), (" 7.5 ", 7.5), ("0", 0.0), ("2.675", 2.68), ("1e2", 100.0), ("-0", 0.0)],
)
def test_add_accepts_non_negative_prices(store: MenuStore, price_text: str, expected: float) -> None:
    entry = store.add(candidate("Soup", price_text))

    assert entry.price == expected
    assert len(store) == 1


@pytest.mark.parametrize(
    ("name", "price_text", "reason"),
    [
        ("", "10", ValidationReason.MISSING_NAME),
        ("   ", "10", ValidationReason.MISSING_NAME),
        ("", "", ValidationReason.MISSING_NAME),
        ("Soup", "", ValidationReason.MISSING_PRICE),
        ("Soup", "   ", ValidationReason.MISSING_PRICE),
        ("Soup", "abc", ValidationReason.INVALID_PRICE),
        ("Soup", "-5", ValidationReason.INVALID_PRICE),
        ("Soup", "nan", ValidationReason.INVALID_PRICE),
        ("Soup", "inf", ValidationReason.INVALID_PRICE),
        ("Soup", "12,50", ValidationReason.INVALID_PRICE),
    ],
)
def test_add_rejects_invalid_candidates(sample_store: MenuStore, name: str, price_text: str, reason: ValidationReason) -> None:
    before = sample_store.list()

    with pytest.raises(MenuValidationError) as excinfo:
        sample_store.add(candidate(name, price_text))

    assert excinfo.value.reason is reason
    assert sample_store.list() == before


def test_add_rejects_unknown_course(store: MenuStore) -> None:
    with pytest.raises(MenuValidationError) as excinfo:
        store.add(candidate("Soup", "10", course="Brunch"))

    assert excinfo.value.reason is ValidationReason.INVALID_COURSE
    assert store.list() == []


def test_add_accepts_course_value_strings(store: MenuStore) -> None:
    entry = store.add(candidate("Cake", "30", course="Dessert"))

    assert entry.course is Course.DESSERT


def test_validation_error_carries_user_message() -> None:
    error = MenuValidationError(ValidationReason.MISSING_NAME)

    assert isinstance(error, ValueError)
    assert error.message == "Please enter a dish name."
    assert str(error) == "Please enter a dish name."


def test_list_preserves_insertion_order_after_removal(counter_store: MenuStore) -> None:
    a = counter_store.add(candidate("A", "1"))
    b = counter_store.add(candidate("B", "2"))
    c = counter_store.add(candidate("C", "3"))

    assert counter_store.list() == [a, b, c]
    assert counter_store.remove(b.id) is True
    assert counter_store.list() == [a, c]


def test_remove_twice_is_a_noop(sample_store: MenuStore) -> None:
    entry_id = sample_store.list()[0].id

    assert sample_store.remove(entry_id) is True
    remaining = sample_store.list()
    assert sample_store.remove(entry_id) is False
    assert sample_store.list() == remaining


def test_remove_unknown_id_returns_false(store: MenuStore) -> None:
    assert store.remove("missing") is False


def test_list_returns_copy(sample_store: MenuStore) -> None:
    entries = sample_store.list()
    entries.clear()

    assert len(sample_store.list()) == 3


def test_get_finds_entry_by_id(sample_store: MenuStore) -> None:
    entry = sample_store.list()[1]

    assert sample_store.get(entry.id) == entry
    assert sample_store.get("missing") is None


def test_aggregates_per_course(sample_store: MenuStore) -> None:
    aggregates = sample_store.aggregates()

    assert aggregates.total_count == 3
    main = aggregates.for_course(Course.MAIN)
    assert (main.count, main.price_sum, main.average) == (2, 150.0, 75.0)
    starter = aggregates.for_course(Course.STARTER)
    assert (starter.count, starter.average) == (1, 20.0)
    dessert = aggregates.for_course(Course.DESSERT)
    assert dessert.count == 0
    assert dessert.average == 0
    assert not math.isnan(dessert.average)


def test_aggregates_on_empty_store(store: MenuStore) -> None:
    aggregates = store.aggregates()

    assert aggregates.total_count == 0
    assert all(aggregates.for_course(course).average == 0.0 for course in Course)


def test_aggregate_average_is_rounded_but_sum_is_not(store: MenuStore) -> None:
    for price in ("10", "10", "10.01"):
        store.add(candidate("Dish", price, Course.STARTER))

    starter = store.aggregates().for_course(Course.STARTER)
    assert starter.price_sum == pytest.approx(30.01)
    assert starter.average == 10.0


def test_aggregates_follow_mutations(sample_store: MenuStore) -> None:
    for entry in sample_store.filtered_list(CourseFilter.MAIN):
        sample_store.remove(entry.id)

    main = sample_store.aggregates().for_course(Course.MAIN)
    assert (main.count, main.price_sum, main.average) == (0, 0.0, 0.0)


def test_filtered_list(sample_store: MenuStore) -> None:
    steak, soup, fish = sample_store.list()

    assert sample_store.filtered_list(CourseFilter.MAIN) == [steak, fish]
    assert sample_store.filtered_list(Course.STARTER) == [soup]
    assert sample_store.filtered_list("Dessert") == []
    assert sample_store.filtered_list(CourseFilter.ALL) == [steak, soup, fish]
    assert sample_store.filtered_list("All") == sample_store.list()


def test_filtered_list_rejects_unknown_selector(sample_store: MenuStore) -> None:
    with pytest.raises(ValueError):
        sample_store.filtered_list("Brunch")


def test_ids_are_unique_for_identical_candidates(store: MenuStore) -> None:
    entries = [store.add(candidate("Soup", "10")) for _ in range(50)]

    assert len({entry.id for entry in entries}) == 50


def test_colliding_id_factory_is_retried() -> None:
    ids = iter(["dup", "dup", "fresh"])
    store = MenuStore(id_factory=lambda: next(ids))

    first = store.add(candidate("A", "1"))
    second = store.add(candidate("B", "1"))

    assert (first.id, second.id) == ("dup", "fresh")


def test_subscribers_see_successful_mutations_only(store: MenuStore) -> None:
    changes: list[StoreChange] = []
    store.subscribe(changes.append)

    entry = store.add(candidate("Soup", "10"))
    with pytest.raises(MenuValidationError):
        store.add(candidate("Soup", "abc"))
    store.remove("missing")
    store.remove(entry.id)

    assert changes == [StoreChange(CHANGE_ADDED, entry), StoreChange(CHANGE_REMOVED, entry)]


def test_listener_runs_after_entry_is_stored(store: MenuStore) -> None:
    seen: list[int] = []
    store.subscribe(lambda change: seen.append(len(store)))

    store.add(candidate("Soup", "10"))

    assert seen == [1]


def test_unsubscribe_stops_notifications(store: MenuStore) -> None:
    changes: list[StoreChange] = []
    unsubscribe = store.subscribe(changes.append)
    unsubscribe()
    unsubscribe()

    store.add(candidate("Soup", "10"))

    assert changes == []


def test_round_cents_is_half_up() -> None:
    assert round_cents(0.125) == 0.13
    assert round_cents(75) == 75.0


def test_parse_price_reports_missing_before_invalid() -> None:
    with pytest.raises(MenuValidationError) as excinfo:
        parse_price("")

    assert excinfo.value.reason is ValidationReason.MISSING_PRICE


@pytest.mark.parametrize("price_text", ["1000000000.01", "1e30", "1e308", "1e999999999"])
def test_parse_price_rejects_prices_above_limit(price_text: str) -> None:
    with pytest.raises(MenuValidationError) as excinfo:
        parse_price(price_text)

    assert excinfo.value.reason is ValidationReason.INVALID_PRICE


def test_aggregates_stay_finite_at_price_limit(store: MenuStore) -> None:
    limit = str(MAX_PRICE)
    for name in ("Wagyu", "Truffle Feast"):
        store.add(candidate(name, limit, Course.MAIN))

    main = store.aggregates().for_course(Course.MAIN)
    assert main.price_sum == 2e9
    assert main.average == 1e9
    assert "Mains: R1000000000.00" in format_summary(store.aggregates()).plain
