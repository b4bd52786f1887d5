"""
Property-based tests for the incremental list presenter.

These tests verify batch reveal arithmetic, the presenter state machine,
and that only the most recent search is ever shown.
"""

import asyncio
import math

import pytest
from hypothesis import given, settings, strategies as st

from hotel_browser.error_handling import HotelFetchError
from hotel_browser.models import FilterCriteria, Hotel
from hotel_browser.presenter import (
    IncrementalListPresenter,
    PresenterStatus,
    VisibilityTrigger,
)


def make_hotels(count, prefix="Hotel"):
    return [
        Hotel(id=str(i), hotel_name=f"{prefix} {i}", hotel_rating=4.0, city="Goa", hotel_price=100 + i)
        for i in range(count)
    ]


def fixed_fetch(hotels):
    async def fetch(criteria):
        return list(hotels)
    return fetch


def loaded_presenter(count, batch_size=10):
    presenter = IncrementalListPresenter(fixed_fetch(make_hotels(count)), batch_size=batch_size)
    asyncio.run(presenter.mount())
    return presenter


@given(
    total=st.integers(min_value=1, max_value=200),
    batch_size=st.integers(min_value=1, max_value=25)
)
@settings(max_examples=100)
def test_reveals_needed_to_show_everything(total, batch_size):
    """
    **Property: ceil(N / B) reveals show all N results**

    The initial batch counts as the first reveal, and the last reveal shows
    N mod B items, or B when N is a multiple of B.
    """
    presenter = loaded_presenter(total, batch_size)
    reveals = 1
    last_step = presenter.state.revealed_count

    while presenter.has_more:
        before = presenter.state.revealed_count
        after = presenter.reveal_next()
        last_step = after - before
        reveals += 1

    assert presenter.state.revealed_count == total
    assert reveals == math.ceil(total / batch_size)
    assert last_step == (total % batch_size or batch_size)


@given(
    total=st.integers(min_value=0, max_value=100),
    batch_size=st.integers(min_value=1, max_value=25),
    triggers=st.integers(min_value=0, max_value=20)
)
@settings(max_examples=100)
def test_visible_hotels_are_a_prefix(total, batch_size, triggers):
    """
    **Property: the visible subset is a prefix of the results in store order**
    """
    presenter = loaded_presenter(total, batch_size)

    for _ in range(triggers):
        presenter.trigger.report_visibility(1.0)

    revealed = presenter.state.revealed_count
    assert presenter.visible_hotels == presenter.state.results[:revealed]
    assert revealed == min(total, batch_size * (triggers + 1))
    assert revealed == total or revealed % batch_size == 0


def test_reveal_progression_example():
    presenter = loaded_presenter(23, batch_size=10)

    counts = [presenter.state.revealed_count]
    for _ in range(4):
        counts.append(presenter.reveal_next())

    assert counts == [10, 20, 23, 23, 23]


def test_reveal_after_everything_shown_is_a_noop():
    presenter = loaded_presenter(5, batch_size=10)

    assert presenter.state.revealed_count == 5
    assert not presenter.has_more
    assert presenter.reveal_next() == 5
    assert presenter.state.revealed_count == 5


def test_empty_result_set():
    presenter = loaded_presenter(0)

    assert presenter.state.status is PresenterStatus.LOADED
    assert presenter.state.revealed_count == 0
    assert presenter.visible_hotels == []
    assert presenter.reveal_next() == 0


def test_starts_loading_and_ignores_reveals():
    presenter = IncrementalListPresenter(fixed_fetch(make_hotels(30)))

    assert presenter.state.status is PresenterStatus.LOADING
    assert presenter.reveal_next() == 0


@pytest.mark.asyncio
async def test_fetch_failure_enters_error_state():
    async def failing_fetch(criteria):
        raise HotelFetchError("Failed to fetch hotel data (status 500)")

    presenter = IncrementalListPresenter(failing_fetch)
    state = await presenter.mount()

    assert state.status is PresenterStatus.ERROR
    assert state.error == "Failed to fetch hotel data (status 500)"
    assert presenter.visible_hotels == []
    assert presenter.reveal_next() == 0


@pytest.mark.asyncio
async def test_new_search_discards_previous_results():
    results = {None: make_hotels(25), "Hotel 1": make_hotels(3, prefix="Other")}

    async def fetch(criteria):
        return results[criteria.hotel_name]

    presenter = IncrementalListPresenter(fetch, batch_size=10)
    await presenter.mount()
    presenter.reveal_next()
    assert presenter.state.revealed_count == 20

    state = await presenter.submit_search(FilterCriteria(hotel_name="Hotel 1"))

    assert state.status is PresenterStatus.LOADED
    assert state.revealed_count == 3
    assert [hotel.hotel_name for hotel in presenter.visible_hotels] == ["Other 0", "Other 1", "Other 2"]


@pytest.mark.asyncio
async def test_search_recovers_from_error_state():
    calls = []

    async def fetch(criteria):
        calls.append(criteria)
        if len(calls) == 1:
            raise HotelFetchError("network down")
        return make_hotels(2)

    presenter = IncrementalListPresenter(fetch)
    await presenter.mount()
    assert presenter.state.status is PresenterStatus.ERROR

    await presenter.submit_search(FilterCriteria(hotel_city="Goa"))

    assert presenter.state.status is PresenterStatus.LOADED
    assert presenter.state.error is None
    assert presenter.total == 2


@pytest.mark.asyncio
async def test_stale_response_is_discarded():
    gates = {"old": asyncio.Event(), "new": asyncio.Event()}
    results = {"old": make_hotels(5, prefix="Old"), "new": make_hotels(2, prefix="New")}

    async def fetch(criteria):
        await gates[criteria.hotel_name].wait()
        return results[criteria.hotel_name]

    presenter = IncrementalListPresenter(fetch)

    old_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="old")))
    await asyncio.sleep(0)
    new_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="new")))
    await asyncio.sleep(0)

    gates["new"].set()
    await new_search
    gates["old"].set()
    await old_search

    assert presenter.state.status is PresenterStatus.LOADED
    assert [hotel.hotel_name for hotel in presenter.visible_hotels] == ["New 0", "New 1"]


@pytest.mark.asyncio
async def test_stale_failure_is_discarded():
    gates = {"old": asyncio.Event(), "new": asyncio.Event()}

    async def fetch(criteria):
        await gates[criteria.hotel_name].wait()
        if criteria.hotel_name == "old":
            raise HotelFetchError("old request failed")
        return make_hotels(1)

    presenter = IncrementalListPresenter(fetch)

    old_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="old")))
    await asyncio.sleep(0)
    new_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="new")))
    await asyncio.sleep(0)

    gates["new"].set()
    await new_search
    gates["old"].set()
    await old_search

    assert presenter.state.status is PresenterStatus.LOADED
    assert presenter.total == 1


@pytest.mark.asyncio
async def test_newer_search_keeps_loading_while_older_resolves():
    gates = {"old": asyncio.Event(), "new": asyncio.Event()}

    async def fetch(criteria):
        await gates[criteria.hotel_name].wait()
        return make_hotels(4)

    presenter = IncrementalListPresenter(fetch)

    old_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="old")))
    await asyncio.sleep(0)
    new_search = asyncio.create_task(presenter.submit_search(FilterCriteria(hotel_name="new")))
    await asyncio.sleep(0)

    gates["old"].set()
    await old_search
    assert presenter.state.status is PresenterStatus.LOADING

    gates["new"].set()
    await new_search
    assert presenter.state.status is PresenterStatus.LOADED


def test_trigger_drives_reveals_until_teardown():
    trigger = VisibilityTrigger()
    presenter = IncrementalListPresenter(fixed_fetch(make_hotels(40)), batch_size=10, trigger=trigger)
    asyncio.run(presenter.mount())

    trigger.report_visibility(1.0)
    trigger.report_visibility(1.0)
    assert presenter.state.revealed_count == 30

    presenter.teardown()
    trigger.report_visibility(1.0)

    assert not trigger.is_observing
    assert presenter.state.revealed_count == 30


def test_partial_visibility_does_not_reveal():
    presenter = loaded_presenter(40, batch_size=10)

    presenter.trigger.report_visibility(0.5)

    assert presenter.state.revealed_count == 10


@pytest.mark.parametrize("batch_size", [0, -3])
def test_batch_size_must_be_positive(batch_size):
    with pytest.raises(ValueError, match="batch_size"):
        IncrementalListPresenter(fixed_fetch([]), batch_size=batch_size)
