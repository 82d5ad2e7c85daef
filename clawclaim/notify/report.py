"""Plain-text cast bodies for scan findings and heartbeats."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from clawclaim.models.outcome import ClaimOutcome


@dataclass(frozen=True)
class ReportMeta:
    """Run metadata shown in every message header."""

    timestamp: str
    agent: str  # acting account address
    network: str
    agent_name: str = "ClawClaimAgent"

    @classmethod
    def now(cls, agent: str, network: str, agent_name: str = "ClawClaimAgent") -> ReportMeta:
        ts = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return cls(timestamp=ts, agent=agent, network=network, agent_name=agent_name)


def format_outcome(outcome: ClaimOutcome) -> str:
    """One findings block. Amount is the exact integer, never a float."""
    kind = f"{outcome.protocol} (dry)" if outcome.dry else outcome.protocol
    lines = [
        f"• Airdrop: {outcome.airdrop_name} ({outcome.token_symbol})",
        f"  Type: {kind}",
        f"  Target: {outcome.target}",
        f"  Amount: {outcome.amount}",
    ]
    if outcome.dry:
        lines.append("  Note: contract=0x0, not broadcasting")
    else:
        lines.append(f"  Tx: {outcome.tx_hash}")
    return "\n".join(lines)


def _header(kind: str, meta: ReportMeta) -> str:
    return (
        f"🟦 {meta.agent_name} {kind} ✅\n"
        f"Run: {meta.timestamp}\n"
        f"Agent: {meta.agent}\n"
        f"Network: {meta.network}"
    )


def build_findings_report(outcomes: Sequence[ClaimOutcome], meta: ReportMeta) -> str:
    blocks = "\n".join(format_outcome(o) for o in outcomes)
    return f"{_header('scan', meta)}\n\nFindings ({len(outcomes)}):\n{blocks}"


def build_heartbeat(meta: ReportMeta) -> str:
    return f"{_header('heartbeat', meta)}\nStatus: nothing claimable"
