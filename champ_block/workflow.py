import enum
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class WorkflowState(enum.Enum):
    IDLE = "idle"
    AWAITING_REASON = "awaiting_reason"


class SelectOutcome(enum.Enum):
    ASK_REASON = "ask_reason"
    UNBLOCKED = "unblocked"


class SelectionWorkflow:
    """Idle -> AwaitingReason -> Idle around the block-reason dialog.

    Grid clicks, blocked-list clicks and search selections all go through
    ``select``. Only one selection is pending at a time; a newer one replaces it.
    """

    def __init__(self, store, on_change: Optional[Callable[[str], None]] = None):
        self.store = store
        self.on_change = on_change
        self.state = WorkflowState.IDLE
        self.pending_id: Optional[str] = None

    @property
    def awaiting_reason(self) -> bool:
        return self.state is WorkflowState.AWAITING_REASON

    def select(self, cid: str) -> SelectOutcome:
        if self.store.is_blocked(cid):
            self._reset()
            self.store.toggle(cid, lambda: "")
            self._changed(cid)
            return SelectOutcome.UNBLOCKED
        self.state = WorkflowState.AWAITING_REASON
        self.pending_id = cid
        return SelectOutcome.ASK_REASON

    def confirm(self, reason: Optional[str]) -> Optional[str]:
        if not self.awaiting_reason:
            return None
        cid = self.pending_id
        self._reset()
        self.store.block(cid, reason or "")
        self._changed(cid)
        return cid

    def cancel(self) -> None:
        if self.awaiting_reason:
            logger.debug("Discarding pending selection %s", self.pending_id)
        self._reset()

    def _reset(self):
        self.state = WorkflowState.IDLE
        self.pending_id = None

    def _changed(self, cid: str):
        if self.on_change is not None:
            self.on_change(cid)
