import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import streamlit as st

from .render import update_single_item
from .storage import JsonFileStorage, StorageReadError
from .workflow import SelectionWorkflow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockRecord:
    reason: str = ""


BlockState = Dict[str, BlockRecord]


def serialize_block_state(state: BlockState) -> str:
    return json.dumps({cid: {"reason": rec.reason} for cid, rec in state.items()}, sort_keys=True)


def deserialize_block_state(text: str) -> BlockState:
    """Parse ``{id: {"reason": str}}``.

    Raises StorageReadError when the text is not a JSON object. Entries that are
    not objects are dropped; a missing or null reason becomes ``""``.
    """
    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as e:
        raise StorageReadError(f"block state is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise StorageReadError("block state must be a JSON object")
    state: BlockState = {}
    for cid, value in raw.items():
        if not isinstance(value, dict):
            logger.warning("Dropping malformed block entry for %r", cid)
            continue
        reason = value.get("reason")
        state[str(cid)] = BlockRecord(reason="" if reason is None else str(reason))
    return state


class BlockStore:
    """Blocked ids and their reasons, written through to storage on every change."""

    def __init__(self, storage, key: str = "blockedChampions"):
        self._storage = storage
        self._key = key
        self._state: BlockState = self.load()

    def load(self) -> BlockState:
        try:
            text = self._storage.get_item(self._key)
            if text is None:
                return {}
            return deserialize_block_state(text)
        except StorageReadError as e:
            logger.warning("Ignoring unreadable block state: %s", e)
            return {}

    def is_blocked(self, cid: str) -> bool:
        return cid in self._state

    def get(self, cid: str) -> Optional[BlockRecord]:
        return self._state.get(cid)

    def snapshot(self) -> BlockState:
        return dict(self._state)

    def __len__(self) -> int:
        return len(self._state)

    def block(self, cid: str, reason: Optional[str]) -> None:
        self._state[cid] = BlockRecord(reason=reason or "")
        logger.debug("Blocked %s (reason=%r)", cid, reason or "")
        self._persist()

    def unblock(self, cid: str) -> None:
        self._state.pop(cid, None)
        logger.debug("Unblocked %s", cid)
        self._persist()

    def toggle(self, cid: str, reason_provider: Callable[[], Optional[str]]) -> bool:
        if self.is_blocked(cid):
            self.unblock(cid)
            return False
        self.block(cid, reason_provider())
        return True

    def clear(self) -> None:
        self._state.clear()
        logger.debug("Cleared all blocks")
        self._persist()

    def _persist(self) -> None:
        self._storage.set_item(self._key, serialize_block_state(self._state))


def _refresh_grid_cell(cid: str):
    cells = st.session_state.get("grid_cells")
    if cells is not None:
        st.session_state.grid_cells = update_single_item(cells, cid, st.session_state.block_store.snapshot())


def init_session(settings):
    if "block_store" not in st.session_state:
        storage = JsonFileStorage(settings.storage_path)
        st.session_state.block_store = BlockStore(storage, key=settings.storage_key)
    st.session_state.setdefault("workflow", SelectionWorkflow(st.session_state.block_store, on_change=_refresh_grid_cell))
    st.session_state.setdefault("grid_cells", None)
    st.session_state.setdefault("open_reason_dialog", False)
