"""Plan sessions: the eager checklist plus lazily generated document slots."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import Awaitable, Callable, Dict, Optional
from uuid import uuid4

from . import planner
from .config import get_settings
from .models import (
    DocumentSlot,
    GenerationResult,
    PlanSnapshot,
    SlotState,
    SlotStatus,
    Tab,
    TAB_SLOTS,
    TripRequest,
)


logger = logging.getLogger(__name__)

SlotGenerator = Callable[[TripRequest], Awaitable[str]]


class PlanningError(RuntimeError):
    """Raised when the checklist for a new plan cannot be produced."""


def default_generators() -> Dict[DocumentSlot, SlotGenerator]:
    return {
        DocumentSlot.COVER_LETTER: planner.generate_cover_letter,
        DocumentSlot.ITINERARY: planner.generate_itinerary,
        DocumentSlot.BUDGET: planner.calculate_budget,
    }


class PlanSession:
    """One submitted request with its checklist and three document slots.

    Slot lifecycle: not_started -> in_progress -> succeeded | failed.
    A succeeded slot is never regenerated; a failed one is retried on the
    next request. Concurrent requests for an in-progress slot share the
    running attempt.
    """

    def __init__(
        self,
        request: TripRequest,
        checklist: str,
        generators: Optional[Dict[DocumentSlot, SlotGenerator]] = None,
        session_id: Optional[str] = None,
    ):
        self.id = session_id or uuid4().hex
        self.request = request
        self.checklist = checklist
        self.active_tab = Tab.CHECKLIST
        self.slots: Dict[DocumentSlot, SlotState] = {slot: SlotState() for slot in DocumentSlot}
        self._generators = generators or default_generators()
        self._inflight: Dict[DocumentSlot, asyncio.Future] = {}

    async def generate(self, slot: DocumentSlot) -> SlotState:
        slot = DocumentSlot(slot)
        state = self.slots[slot]
        if state.status is SlotStatus.SUCCEEDED:
            return state
        task = self._inflight.get(slot)
        if task is None:
            task = asyncio.ensure_future(self._run(slot))
            self._inflight[slot] = task
        await asyncio.shield(task)
        return state

    async def _run(self, slot: DocumentSlot) -> None:
        state = self.slots[slot]
        state.status = SlotStatus.IN_PROGRESS
        state.error = None
        state.generation_count += 1
        try:
            content = await self._generators[slot](self.request)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to generate %s for plan %s: %s", slot.value, self.id, exc)
            state.status = SlotStatus.FAILED
            state.content = None
            state.error = str(exc) or f"Could not generate {slot.value}. Please try again."
        else:
            state.status = SlotStatus.SUCCEEDED
            state.content = content
        finally:
            self._inflight.pop(slot, None)

    async def activate_tab(self, tab: Tab, generate: bool = False) -> None:
        """Switch tabs; optionally generate the slots shown on that tab."""

        self.active_tab = Tab(tab)
        if generate:
            await asyncio.gather(*(self.generate(slot) for slot in TAB_SLOTS[self.active_tab]))

    def result(self) -> GenerationResult:
        def content(slot: DocumentSlot) -> Optional[str]:
            state = self.slots[slot]
            return state.content if state.status is SlotStatus.SUCCEEDED else None

        return GenerationResult(
            checklist=self.checklist,
            cover_letter=content(DocumentSlot.COVER_LETTER),
            itinerary=content(DocumentSlot.ITINERARY),
            budget=content(DocumentSlot.BUDGET),
        )

    def snapshot(self) -> PlanSnapshot:
        return PlanSnapshot(
            id=self.id,
            request=self.request,
            active_tab=self.active_tab,
            checklist=self.checklist,
            slots={slot.value: state for slot, state in self.slots.items()},
        )


class PlanStore:
    """In-memory registry of plan sessions.

    Holds at most ``max_plans`` sessions (``VISA_PLANNER_MAX_PLANS`` when not
    given); adding one more evicts the least recently used session as if it
    had been discarded.
    """

    def __init__(
        self,
        generators: Optional[Dict[DocumentSlot, SlotGenerator]] = None,
        max_plans: Optional[int] = None,
    ):
        self._generators = generators
        self._max_plans = max_plans
        self._sessions: "OrderedDict[str, PlanSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self, request: TripRequest) -> PlanSession:
        try:
            checklist = await planner.get_checklist(request)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Checklist generation failed for %s: %s", request.destination, exc)
            raise PlanningError(
                str(exc) or "An unknown error occurred. Please check your connection and try again."
            ) from exc
        session = PlanSession(request, checklist, generators=self._generators)
        self._sessions[session.id] = session
        logger.info("Created plan %s for %s -> %s", session.id, request.nationality, request.destination)
        self._evict()
        return session

    def get(self, session_id: str) -> PlanSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise KeyError(f"Unknown plan: {session_id}") from None
        self._sessions.move_to_end(session_id)
        return session

    def _evict(self) -> None:
        limit = self._max_plans if self._max_plans is not None else get_settings().max_plans
        while len(self._sessions) > limit:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted plan %s (store holds at most %s)", evicted_id, limit)

    def discard(self, session_id: str) -> bool:
        """Forget a session; generations still in flight finish unobserved."""

        return self._sessions.pop(session_id, None) is not None
