"""Shared test fixtures — chain and notifier doubles, report metadata."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from clawclaim.models.airdrop import ZERO_ADDRESS, AirdropDefinition
from clawclaim.notify.report import ReportMeta
from tests.helpers import AGENT, make_merkle_airdrop


@pytest.fixture
def chain() -> AsyncMock:
    """Chain client double: nothing claimable, nothing claimed, fixed tx hashes."""
    client = AsyncMock()
    client.read_claimable.return_value = 0
    client.read_is_claimed.return_value = False
    client.submit_simple_claim.return_value = "0xsimpletx"
    client.submit_merkle_claim.return_value = "0xmerkletx"
    return client


@pytest.fixture
def notifier() -> AsyncMock:
    n = AsyncMock()
    n.post_message.return_value = True
    return n


@pytest.fixture
def meta() -> ReportMeta:
    return ReportMeta(
        timestamp="2026-01-01T00:00:00.000Z",
        agent=AGENT,
        network="Base Sepolia",
    )


@pytest.fixture
def dry_airdrop() -> AirdropDefinition:
    """Merkle airdrop on the 0x0 dry-run marker."""
    return make_merkle_airdrop(id="drop-dry", contract=ZERO_ADDRESS)
