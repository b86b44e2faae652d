# ============================================================
# IETF AI Assistant FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - POST /api/chat -> completion proxy -> OpenRouter
#   - Read-only catalog panels (RFCs, working groups, notifications)
#   - Health checks
# ============================================================

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# --- Local imports ---
from ietf_assistant.settings import settings
from ietf_assistant.generate import CompletionProxy
from ietf_assistant.search import load_catalog
from ietf_assistant.search.prompts import explain_rfc, explain_working_group
from ietf_assistant.search.rank import NOTIFICATION_FILTERS, summarize_working_groups
from ietf_assistant.search.types import (
    RFC,
    DashboardSummary,
    Digest,
    Notification,
    NotificationPreference,
    WorkingGroup,
)

# ------------------------------------------------------------
# 📝 Logging
# ------------------------------------------------------------
logger = logging.getLogger("ietf_assistant")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    logger.addHandler(h)
logger.setLevel(settings.LOG_LEVEL)

# ------------------------------------------------------------
# 🔧 Proxy + catalog
# ------------------------------------------------------------
proxy = CompletionProxy(settings)
catalog = load_catalog()

if not settings.has_api_key:
    logger.warning("OPENROUTER_API_KEY is not set; /api/chat will answer 500")

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.app_name, version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class RFCView(RFC):
    explanation: Optional[str] = None

class RFCSearchResponse(BaseModel):
    query: str
    count: int
    rfcs: List[RFCView]

class WorkingGroupView(WorkingGroup):
    explanation: Optional[str] = None

class WorkingGroupDashboard(BaseModel):
    query: str
    count: int
    summary: DashboardSummary
    areas: List[str]
    working_groups: List[WorkingGroupView]

class NotificationFeed(BaseModel):
    filter: str
    unread_count: int
    count: int
    notifications: List[Notification]

class PreferencesResponse(BaseModel):
    preferences: List[NotificationPreference]


def error_response(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    body: Dict[str, Any] = {"error": error}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def rfc_view(rfc: RFC, audience: Optional[str]) -> RFCView:
    return RFCView(**rfc.model_dump(), explanation=explain_rfc(rfc, audience))


def with_explanation(wg: WorkingGroup, audience: Optional[str]) -> WorkingGroupView:
    return WorkingGroupView(**wg.model_dump(), explanation=explain_working_group(wg, audience))

# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
@app.post("/api/chat")
async def chat(request: Request):
    raw = await request.body()
    # the proxy blocks on the upstream call; keep it off the event loop
    result = await run_in_threadpool(proxy.handle, raw)
    return JSONResponse(status_code=result.status_code, content=result.to_payload())

# ------------------------------------------------------------
# 📚 RFC search
# ------------------------------------------------------------
@app.get("/api/rfcs", response_model=RFCSearchResponse)
def search_rfcs(
    q: str = Query("", description="Number, title, author or keyword"),
    status: str = "all",
    category: str = "all",
    audience: Optional[str] = None,
):
    rfcs = catalog.search_rfcs(q, status=status, category=category)
    return RFCSearchResponse(query=q, count=len(rfcs), rfcs=[rfc_view(r, audience) for r in rfcs])

@app.get("/api/rfcs/{number}", response_model=RFCView)
def get_rfc(number: str, audience: Optional[str] = None):
    rfc = catalog.get_rfc(number)
    if rfc is None:
        return error_response(404, "RFC not found")
    return rfc_view(rfc, audience)

# ------------------------------------------------------------
# 🏛️ Working-group dashboard
# ------------------------------------------------------------
@app.get("/api/working-groups", response_model=WorkingGroupDashboard)
def working_groups(
    q: str = Query("", description="Acronym, name, description or hot topic"),
    area: str = "all",
    status: str = "all",
    audience: Optional[str] = None,
):
    groups = catalog.search_working_groups(q, area=area, status=status)
    return WorkingGroupDashboard(
        query=q,
        count=len(groups),
        summary=summarize_working_groups(groups),
        areas=catalog.areas(),
        working_groups=[with_explanation(wg, audience) for wg in groups],
    )

@app.get("/api/working-groups/{acronym}", response_model=WorkingGroupView)
def get_working_group(acronym: str, audience: Optional[str] = None):
    wg = catalog.get_working_group(acronym)
    if wg is None:
        return error_response(404, "Working group not found")
    return with_explanation(wg, audience)

# ------------------------------------------------------------
# 🔔 Notifications + digest preferences
# ------------------------------------------------------------
@app.get("/api/notifications", response_model=NotificationFeed)
def notifications(filter: str = "all", audience: Optional[str] = None):
    if filter not in NOTIFICATION_FILTERS:
        return error_response(400, "Unknown filter", f"Expected one of: {', '.join(NOTIFICATION_FILTERS)}")
    if filter == "relevant" and not audience:
        return error_response(400, "Missing audience")
    items = catalog.list_notifications(filter, audience)
    return NotificationFeed(
        filter=filter,
        unread_count=catalog.unread_count(),
        count=len(items),
        notifications=items,
    )

@app.get("/api/notifications/preferences", response_model=PreferencesResponse)
def notification_preferences():
    return PreferencesResponse(preferences=catalog.preferences)

@app.get("/api/notifications/digest", response_model=Digest)
def notification_digest(audience: Optional[str] = None):
    if not audience:
        return error_response(400, "Missing audience")
    return catalog.digest_for(audience)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "model": settings.OPENROUTER_MODEL,
        "configured": settings.has_api_key,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "IETF AI Assistant service running."}
