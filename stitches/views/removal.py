"""
Removal confirmation gate.

Idle --request(id)--> PendingConfirm(id)
PendingConfirm --confirm--> remove(id), Idle
PendingConfirm --cancel/close--> Idle (cart untouched)

A new request while one is pending replaces the target.
"""
from typing import Any, Callable, Optional

from stitches.logging import get_logger, log_id

logger = get_logger(__name__)

STATE_IDLE = "idle"
STATE_PENDING_CONFIRM = "pending_confirm"


class RemovalDialog:
    """The confirmation dialog element."""

    def __init__(self) -> None:
        self.visible = False


class RemovalGate:
    def __init__(self, remove: Callable[[str], Any], dialog: Optional[RemovalDialog] = None):
        self._remove = remove
        self.dialog = dialog if dialog is not None else RemovalDialog()
        self.pending_product_id: Optional[str] = None

    @property
    def state(self) -> str:
        return STATE_IDLE if self.pending_product_id is None else STATE_PENDING_CONFIRM

    def request(self, product_id: str) -> None:
        """Remove control clicked: remember the target and show the dialog."""
        self.pending_product_id = product_id
        self.dialog.visible = True

    def confirm(self) -> None:
        product_id = self.pending_product_id
        if product_id:
            logger.info(f"Removal confirmed for {log_id(product_id)}")
            self._remove(product_id)
        self.close()

    def cancel(self) -> None:
        self.close()

    def close(self) -> None:
        self.pending_product_id = None
        self.dialog.visible = False
