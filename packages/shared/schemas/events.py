"""Shared order event schema (v1).

The service keeps an append-only event log per order. Clients can consume these events to
render an audit trail.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventTypeV1(str, Enum):
    ORDER_CREATED = "ORDER_CREATED"
    LINE_ADDED = "LINE_ADDED"
    STATUS_CHANGED = "STATUS_CHANGED"


class OrderEventV1(BaseModel):
    id: str
    order_id: str

    event_type: EventTypeV1
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: str
