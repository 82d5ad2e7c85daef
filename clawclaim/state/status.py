"""Run status state machine and notification gating.

States: unknown (no prior record) -> claimable | no_claim.
The new status is written every run; whether anything is posted depends on
the previous status and this run's action count.
"""

from __future__ import annotations

from enum import Enum

from loguru import logger

from clawclaim.models.outcome import RunStatus
from clawclaim.state.store import StatusStore


class Notification(Enum):
    FINDINGS = "findings"  # full report
    HEARTBEAT = "heartbeat"  # "nothing claimable" after a claimable run
    NONE = "none"


def next_status(actions: int) -> RunStatus:
    return RunStatus.CLAIMABLE if actions > 0 else RunStatus.NO_CLAIM


def notification_for(previous: RunStatus, actions: int) -> Notification:
    """Findings on every run with actions; heartbeat only on claimable -> nothing."""
    if actions > 0:
        return Notification.FINDINGS
    if previous is RunStatus.CLAIMABLE:
        return Notification.HEARTBEAT
    return Notification.NONE


class StatusTracker:
    def __init__(self, store: StatusStore) -> None:
        self._store = store

    async def load(self) -> RunStatus:
        """Previous run status; UNKNOWN when missing or unrecognized."""
        raw = await self._store.get()
        if raw is None:
            return RunStatus.UNKNOWN
        try:
            return RunStatus(raw)
        except ValueError:
            logger.warning(f"[STATUS] Unrecognized stored status {raw!r}, treating as unknown")
            return RunStatus.UNKNOWN

    async def commit(self, actions: int) -> RunStatus:
        """Persist the status for this run's action count. Always writes."""
        status = next_status(actions)
        await self._store.set(status.value)
        return status
