"""One scan run: read status, scan, persist status, notify.

Order matters: the status is written before anything is posted, so a failed
post never changes what the next run sees. A scan failure propagates before
the write, leaving the previous status in place.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from clawclaim.claims.engine import ClaimEngine
from clawclaim.models.airdrop import AirdropDefinition
from clawclaim.models.outcome import RunStatus, ScanResult
from clawclaim.notify.notifier import Notifier
from clawclaim.notify.report import ReportMeta, build_findings_report, build_heartbeat
from clawclaim.state.status import Notification, StatusTracker, notification_for


@dataclass
class RunReport:
    previous: RunStatus
    current: RunStatus
    result: ScanResult
    notification: Notification
    message: str | None = None
    delivered: bool = False


async def deliver(notifier: Notifier, message: str) -> bool:
    """Post a message; any failure is logged and swallowed."""
    try:
        ok = await notifier.post_message(message)
    except Exception as e:
        logger.warning(f"[RUN] Notifier raised, message dropped: {e}")
        return False
    if not ok:
        logger.warning("[RUN] Notification was not delivered")
    return ok


async def run_once(
    *,
    engine: ClaimEngine,
    tracker: StatusTracker,
    notifier: Notifier,
    targets: Iterable[str],
    airdrops: Iterable[AirdropDefinition],
    meta: ReportMeta,
) -> RunReport:
    previous = await tracker.load()
    logger.info(f"[RUN] Starting scan (previous status: {previous.value})")

    result = await engine.scan(targets, airdrops)
    current = await tracker.commit(result.actions)
    decision = notification_for(previous, result.actions)

    report = RunReport(
        previous=previous, current=current, result=result, notification=decision
    )
    if decision is Notification.FINDINGS:
        report.message = build_findings_report(result.outcomes, meta)
    elif decision is Notification.HEARTBEAT:
        report.message = build_heartbeat(meta)
    else:
        logger.info(
            f"[RUN] No heartbeat posted (status unchanged: {previous.value} -> {current.value})"
        )

    if report.message is not None:
        report.delivered = await deliver(notifier, report.message)

    logger.info(
        f"[RUN] Finished: {result.actions} action(s), status {previous.value} -> {current.value}, "
        f"notification={decision.value}"
    )
    return report
