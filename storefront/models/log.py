# storefront/models/log.py
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# Represents one audited user action within the session
class AuditEntry(BaseModel):
    id: int
    ts: datetime = Field(default_factory=_utc_now)
    action: str
    resource: str
    status: str
    meta: Dict[str, Any] = Field(default_factory=dict)


class AuditTrail:
    """Bounded, in-memory audit trail; the oldest entries fall off past ``limit``."""

    def __init__(self, limit: int = 500):
        self._entries: Deque[AuditEntry] = deque(maxlen=limit)
        self._next_id = 1

    def append(self, *, action: str, resource: str, status: str, meta: Optional[Dict[str, Any]] = None) -> AuditEntry:
        entry = AuditEntry(id=self._next_id, action=action, resource=resource, status=status, meta=meta or {})
        self._next_id += 1
        self._entries.append(entry)
        return entry

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
