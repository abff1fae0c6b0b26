# storefront/routes/logs.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from pydantic import BaseModel

from storefront.models.log import AuditEntry
from storefront.session import Storefront
from storefront.state import get_storefront

router = APIRouter(prefix="/logs", tags=["Logs"])

class LogPage(BaseModel):
    items: List[AuditEntry]
    total: int
    page: int
    page_size: int

@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    action: Optional[str] = Query(None, description="Filter by action"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL)"),
    store: Storefront = Depends(get_storefront),
):
    logs = store.audit.entries()

    if action:
        logs = [e for e in logs if action.upper() in e.action]
    if resource:
        logs = [e for e in logs if resource.lower() in e.resource]
    if status:
        logs = [e for e in logs if e.status == status.upper()]

    # Newest first
    logs.reverse()

    total = len(logs)
    start = (page - 1) * page_size
    return {
        "items": logs[start:start + page_size],
        "total": total,
        "page": page,
        "page_size": page_size,
    }
