"""Web-facing observers for data-change events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - store.changed
  - shopping.range_changed

and keeps an in-memory ring buffer of recent events that clients poll
(GET /api/events?since=<cursor>) to know when to re-fetch derived views
(nutrition totals, shopping list) after a write.

Each event gets an auto-increment id (cursor); a client passes the last id it
has seen and receives only newer events. The buffer is per-process and capped
at MAX_EVENTS.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, STORE_CHANGED, SHOPPING_RANGE_CHANGED

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in ('entities', 'ops', 'start', 'end'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(STORE_CHANGED, _record)
    GLOBAL_EVENT_BUS.subscribe(SHOPPING_RANGE_CHANGED, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns everything still buffered.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
