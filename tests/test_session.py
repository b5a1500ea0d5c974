"""Tests for plan sessions and the plan store."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest

from visa_planner.config import get_settings
from visa_planner.models import DocumentSlot, SlotStatus, Tab, TripRequest
from visa_planner.session import PlanningError, PlanSession, PlanStore


def _sample_request(**overrides):
    data = dict(
        nationality="Ghana",
        destination="Germany",
        travel_date="2025-06-01",
        purpose="Business",
    )
    data.update(overrides)
    return TripRequest(**data)


class CountingGenerator:
    def __init__(self, text="generated", fail_times=0):
        self.text = text
        self.fail_times = fail_times
        self.calls = 0

    async def __call__(self, request):
        self.calls += 1
        await asyncio.sleep(0)
        if self.calls <= self.fail_times:
            raise RuntimeError("generator exploded")
        return f"{self.text} for {request.destination}"


def _session(**generators):
    gens = {slot: generators.get(slot.value, CountingGenerator(slot.value)) for slot in DocumentSlot}
    return PlanSession(_sample_request(), "# checklist\n", generators=gens), gens


def test_succeeded_slot_is_not_regenerated():
    session, gens = _session()

    async def twice():
        first = await session.generate(DocumentSlot.BUDGET)
        first_content = first.content
        second = await session.generate(DocumentSlot.BUDGET)
        return first_content, second

    first_content, second = asyncio.run(twice())
    assert second.status is SlotStatus.SUCCEEDED
    assert second.content == first_content == "budget for Germany"
    assert gens[DocumentSlot.BUDGET].calls == 1
    assert second.generation_count == 1


def test_failed_slot_keeps_error_apart_and_is_retryable():
    flaky = CountingGenerator("letter", fail_times=1)
    session, _ = _session(cover_letter=flaky)

    state = asyncio.run(session.generate(DocumentSlot.COVER_LETTER))
    assert state.status is SlotStatus.FAILED
    assert state.error == "generator exploded"
    assert state.content is None
    assert session.result().cover_letter is None

    state = asyncio.run(session.generate(DocumentSlot.COVER_LETTER))
    assert state.status is SlotStatus.SUCCEEDED
    assert state.content == "letter for Germany"
    assert state.error is None
    assert flaky.calls == 2


def test_failure_does_not_touch_other_slots():
    session, _ = _session(itinerary=CountingGenerator(fail_times=5))

    async def both():
        await asyncio.gather(
            session.generate(DocumentSlot.ITINERARY),
            session.generate(DocumentSlot.BUDGET),
        )

    asyncio.run(both())
    assert session.slots[DocumentSlot.ITINERARY].status is SlotStatus.FAILED
    assert session.slots[DocumentSlot.BUDGET].status is SlotStatus.SUCCEEDED
    assert session.slots[DocumentSlot.COVER_LETTER].status is SlotStatus.NOT_STARTED


def test_concurrent_requests_share_one_attempt():
    session, gens = _session()

    async def race():
        await asyncio.gather(*(session.generate(DocumentSlot.ITINERARY) for _ in range(3)))

    asyncio.run(race())
    assert gens[DocumentSlot.ITINERARY].calls == 1


def test_slot_is_in_progress_while_generating():
    seen = []

    async def slow(request):
        seen.append(session.slots[DocumentSlot.BUDGET].status)
        return "done"

    session, _ = _session(budget=slow)
    asyncio.run(session.generate(DocumentSlot.BUDGET))
    assert seen == [SlotStatus.IN_PROGRESS]


def test_activate_tab_generates_only_that_tabs_slots():
    session, gens = _session()
    asyncio.run(session.activate_tab(Tab.DOCUMENTS, generate=True))
    assert session.active_tab is Tab.DOCUMENTS
    assert gens[DocumentSlot.COVER_LETTER].calls == 1
    assert gens[DocumentSlot.ITINERARY].calls == 1
    assert gens[DocumentSlot.BUDGET].calls == 0

    asyncio.run(session.activate_tab(Tab.BUDGET))
    assert session.slots[DocumentSlot.BUDGET].status is SlotStatus.NOT_STARTED


def test_result_collects_succeeded_slots():
    session, _ = _session()
    asyncio.run(session.generate(DocumentSlot.ITINERARY))
    result = session.result()
    assert result.checklist == "# checklist\n"
    assert result.itinerary == "itinerary for Germany"
    assert result.cover_letter is None
    assert result.budget is None


def test_store_creates_and_discards_sessions():
    store = PlanStore()
    session = asyncio.run(store.create(_sample_request()))
    assert session.checklist.startswith("# Your Visa Plan for Germany")
    assert store.get(session.id) is session
    assert len(store) == 1

    assert store.discard(session.id) is True
    assert store.discard(session.id) is False
    with pytest.raises(KeyError):
        store.get(session.id)


def test_store_uses_default_generators():
    store = PlanStore()

    async def run():
        session = await store.create(_sample_request())
        return await session.generate(DocumentSlot.BUDGET)

    state = asyncio.run(run())
    assert state.content.startswith("# Estimated Travel Budget for Germany")


@patch("visa_planner.session.planner.get_checklist", side_effect=RuntimeError("table unavailable"))
def test_store_raises_planning_error_when_checklist_fails(_mock_checklist):
    store = PlanStore()
    with pytest.raises(PlanningError, match="table unavailable"):
        asyncio.run(store.create(_sample_request()))
    assert len(store) == 0


def test_discarded_session_still_finishes_in_flight_work():
    store = PlanStore()

    async def run():
        session = await store.create(_sample_request())
        task = asyncio.ensure_future(session.generate(DocumentSlot.COVER_LETTER))
        await asyncio.sleep(0)
        store.discard(session.id)
        await task
        return session

    session = asyncio.run(run())
    assert session.slots[DocumentSlot.COVER_LETTER].status is SlotStatus.SUCCEEDED
    assert len(store) == 0


def test_cancelled_waiter_does_not_abort_shared_generation():
    calls = []

    async def slow(request):
        calls.append(request.destination)
        await asyncio.sleep(0.05)
        return "budget ready"

    session, _ = _session(budget=slow)

    async def run():
        first = asyncio.ensure_future(session.generate(DocumentSlot.BUDGET))
        second = asyncio.ensure_future(session.generate(DocumentSlot.BUDGET))
        await asyncio.sleep(0.01)
        first.cancel()
        state = await second
        return first, state

    first, state = asyncio.run(run())
    assert first.cancelled()
    assert state.status is SlotStatus.SUCCEEDED
    assert state.content == "budget ready"
    assert state.generation_count == 1
    assert calls == ["Germany"]


def test_store_evicts_least_recently_used_plan():
    store = PlanStore(max_plans=2)

    async def create_three():
        first = await store.create(_sample_request())
        second = await store.create(_sample_request(destination="France"))
        store.get(first.id)
        third = await store.create(_sample_request(destination="Japan"))
        return first, second, third

    first, second, third = asyncio.run(create_three())
    assert len(store) == 2
    assert store.get(first.id) is first
    assert store.get(third.id) is third
    with pytest.raises(KeyError):
        store.get(second.id)


def test_store_limit_defaults_to_settings(monkeypatch):
    monkeypatch.setenv("VISA_PLANNER_MAX_PLANS", "1")
    get_settings.cache_clear()
    store = PlanStore()

    async def create_two():
        await store.create(_sample_request())
        return await store.create(_sample_request())

    latest = asyncio.run(create_two())
    assert len(store) == 1
    assert store.get(latest.id) is latest
