"""FastAPI application exposing the visa planner."""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import get_settings
from .constants import COUNTRIES, DESTINATIONS, PURPOSES
from .document import render_html
from .forms import InvalidTripRequest, trip_request_from_dict
from .models import DocumentSlot, SlotState, Tab, to_dict
from .session import PlanningError, PlanSession, PlanStore
from .share import build_share_url


app = FastAPI(title="Visa Planner", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

plan_store = PlanStore()

class TripRequestPayload(BaseModel):
    nationality: str
    destination: str
    travel_date: str = Field(..., description="ISO date (YYYY-MM-DD), checked by the form validation")
    purpose: str


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"


def _render(text: Optional[str], output: OutputFormat) -> Optional[str]:
    if text is None or output is OutputFormat.MARKDOWN:
        return text
    return render_html(text)


def _slot_view(state: SlotState, output: OutputFormat) -> Dict[str, Any]:
    return {
        "status": state.status.value,
        "content": _render(state.content, output),
        "error": state.error,
    }


def _plan_view(session: PlanSession, output: OutputFormat) -> Dict[str, Any]:
    snapshot = session.snapshot()
    return {
        "id": snapshot.id,
        "request": to_dict(snapshot.request),
        "active_tab": snapshot.active_tab.value,
        "checklist": _render(snapshot.checklist, output),
        "slots": {name: _slot_view(state, output) for name, state in snapshot.slots.items()},
    }


def _get_session(plan_id: str) -> PlanSession:
    try:
        return plan_store.get(plan_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Plan {plan_id} not found.") from exc


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/options")
def options() -> Dict[str, Any]:
    return {
        "nationalities": sorted(COUNTRIES),
        "destinations": sorted(DESTINATIONS),
        "purposes": list(PURPOSES),
    }


@app.post("/plans", status_code=201)
async def create_plan(
    payload: TripRequestPayload,
    output: OutputFormat = Query(OutputFormat.MARKDOWN, alias="format"),
) -> Dict[str, Any]:
    try:
        req = trip_request_from_dict(payload.model_dump())
    except InvalidTripRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    try:
        session = await plan_store.create(req)
    except PlanningError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return _plan_view(session, output)


@app.get("/plans/{plan_id}")
def get_plan(
    plan_id: str,
    output: OutputFormat = Query(OutputFormat.MARKDOWN, alias="format"),
) -> Dict[str, Any]:
    return _plan_view(_get_session(plan_id), output)


@app.post("/plans/{plan_id}/documents/{slot}")
async def generate_document(
    plan_id: str,
    slot: DocumentSlot,
    output: OutputFormat = Query(OutputFormat.MARKDOWN, alias="format"),
) -> Dict[str, Any]:
    session = _get_session(plan_id)
    state = await session.generate(slot)
    return _slot_view(state, output)


@app.post("/plans/{plan_id}/tabs/{tab}")
async def activate_tab(
    plan_id: str,
    tab: Tab,
    generate: bool = False,
    output: OutputFormat = Query(OutputFormat.MARKDOWN, alias="format"),
) -> Dict[str, Any]:
    session = _get_session(plan_id)
    await session.activate_tab(tab, generate=generate)
    return _plan_view(session, output)


@app.delete("/plans/{plan_id}", status_code=204)
def reset_plan(plan_id: str) -> Response:
    if not plan_store.discard(plan_id):
        raise HTTPException(status_code=404, detail=f"Plan {plan_id} not found.")
    return Response(status_code=204)


@app.get("/plans/{plan_id}/share")
def share_plan(plan_id: str) -> Dict[str, str]:
    session = _get_session(plan_id)
    return {"url": build_share_url(session.request, session.checklist)}
