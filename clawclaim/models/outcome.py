"""Scan results: per-pair claim outcomes and the persisted run status."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class RunStatus(StrEnum):
    """Single persisted value gating heartbeat notifications."""

    CLAIMABLE = "claimable"
    NO_CLAIM = "no_claim"
    UNKNOWN = "unknown"  # no prior record


@dataclass(frozen=True)
class ClaimOutcome:
    """One positive claim determination (real or dry) for a (target, airdrop) pair."""

    airdrop_id: str
    airdrop_name: str
    token_symbol: str
    target: str
    protocol: str  # "simple" or "merkle"
    amount: int  # raw token units, arbitrary precision
    tx_hash: str | None = None
    dry: bool = False  # zero-address contract, nothing broadcast


@dataclass
class ScanResult:
    """Aggregate of one engine pass, outcomes in target-major order."""

    outcomes: list[ClaimOutcome] = field(default_factory=list)
    skipped: int = 0

    @property
    def actions(self) -> int:
        return len(self.outcomes)

    def add(self, outcome: ClaimOutcome) -> None:
        self.outcomes.append(outcome)
