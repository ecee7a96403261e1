"""Document store: the database boundary.

Collections of JSON documents keyed by id, persisted to a single file:

    { "ingredients": { "<id>": {...}, ... }, "recipes": {...}, ... }

Reads return whole collections (no pagination, no server-side filtering).
Writes are batches of per-document update/delete operations applied
atomically; last write wins.
"""
import copy
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from family_meal.events.Event_Bus import GLOBAL_EVENT_BUS, STORE_CHANGED
from family_meal.utilities.config import STORE_FILE

logger = logging.getLogger(__name__)

ENTITIES = ("ingredients", "recipes", "pantries", "mealPlanEntries", "waterEntries", "persons")
UPDATE = "update"
DELETE = "delete"


class StoreError(Exception):
    pass


class UnknownEntityError(StoreError):
    pass


class RecordNotFoundError(StoreError):
    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} record '{record_id}' not found")
        self.entity = entity
        self.record_id = record_id


class TxOp:
    """One operation of a batch: update (merge/create) or delete a document."""

    def __init__(self, entity: str, id: str, action: str = UPDATE, data: Optional[Dict[str, Any]] = None):
        self.entity = entity
        self.id = id
        self.action = action
        self.data = dict(data or {})

    def __repr__(self) -> str:
        return f"TxOp({self.action} {self.entity}/{self.id})"


def tx_update(entity: str, record_id: str, data: Dict[str, Any]) -> TxOp:
    return TxOp(entity, record_id, UPDATE, data)


def tx_delete(entity: str, record_id: str) -> TxOp:
    return TxOp(entity, record_id, DELETE)


def new_id() -> str:
    return str(uuid4())


class DocumentStore:
    def __init__(self, path, event_bus=None):
        self.path = Path(path)
        self._lock = Lock()
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    # --- Persistence -------------------------------------------------------
    def _empty(self) -> Dict[str, Dict[str, Any]]:
        return {entity: {} for entity in ENTITIES}

    def _load(self) -> Dict[str, Dict[str, Any]]:
        data = self._empty()
        if not self.path.exists():
            return data
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                stored = json.load(f) or {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load store %s: %s", self.path, e)
            return data
        if not isinstance(stored, dict):
            logger.error("Ignoring store %s: expected a JSON object, got %s", self.path, type(stored).__name__)
            return data
        for entity in ENTITIES:
            collection = stored.get(entity)
            if isinstance(collection, dict):
                data[entity] = collection
        return data

    def _atomic_write(self, data: Dict[str, Dict[str, Any]]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".store_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    @staticmethod
    def _check_entity(entity: str):
        if entity not in ENTITIES:
            raise UnknownEntityError(f"Unknown entity: {entity}")

    # --- Reads -------------------------------------------------------------
    def query(self, *entities: str) -> Dict[str, List[Dict[str, Any]]]:
        """Return full collections for the given entities as independent copies."""
        for entity in entities:
            self._check_entity(entity)
        with self._lock:
            data = self._load()
        result = {}
        for entity in entities:
            result[entity] = [{**copy.deepcopy(doc), "id": rid} for rid, doc in data[entity].items()]
        return result

    def get(self, entity: str, record_id: str) -> Dict[str, Any]:
        self._check_entity(entity)
        with self._lock:
            doc = self._load()[entity].get(record_id)
        if doc is None:
            raise RecordNotFoundError(entity, record_id)
        return {**copy.deepcopy(doc), "id": record_id}

    # --- Writes ------------------------------------------------------------
    def transact(self, ops: Iterable[TxOp]) -> List[str]:
        """Apply a batch of operations atomically. Returns the ids touched."""
        ops = list(ops)
        for op in ops:
            self._check_entity(op.entity)
            if op.action not in (UPDATE, DELETE):
                raise StoreError(f"Unknown action: {op.action}")
            if not op.id:
                raise StoreError(f"Missing id for {op.action} on {op.entity}")
        if not ops:
            return []
        with self._lock:
            data = self._load()
            for op in ops:
                collection = data[op.entity]
                if op.action == DELETE:
                    collection.pop(op.id, None)
                else:
                    doc = collection.get(op.id, {})
                    doc.update({k: v for k, v in op.data.items() if k != "id"})
                    collection[op.id] = doc
            self._atomic_write(data)
        entities = sorted({op.entity for op in ops})
        logger.info("Committed batch of %d ops on %s", len(ops), ", ".join(entities))
        self._event_bus.publish(STORE_CHANGED, {"entities": entities, "ops": len(ops)})
        return [op.id for op in ops]


_default_store: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    """Process-wide store at the configured STORE_FILE (FastAPI dependency)."""
    global _default_store
    if _default_store is None:
        _default_store = DocumentStore(STORE_FILE)
    return _default_store


__all__ = [
    'ENTITIES', 'UPDATE', 'DELETE', 'StoreError', 'UnknownEntityError', 'RecordNotFoundError',
    'TxOp', 'tx_update', 'tx_delete', 'new_id', 'DocumentStore', 'get_store',
]
