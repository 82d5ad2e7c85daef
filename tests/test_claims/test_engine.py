"""Tests for ClaimEngine — validation, dispatch, ordering and proof caching."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from clawclaim.claims.engine import ClaimEngine, is_valid_contract
from clawclaim.claims.exceptions import UnsupportedProtocolError
from clawclaim.registry.loader import ProofCache
from tests.helpers import (
    PROOF_NODE,
    TARGET_A,
    TARGET_B,
    make_airdrop,
    make_dataset,
    make_merkle_airdrop,
    proof_cache,
)


class TestContractValidation:
    @pytest.mark.parametrize(
        "contract",
        ["", "0x123", "not-an-address", "0xZZZZ222222222222222222222222222222222222"],
    )
    def test_invalid_contracts(self, contract: str):
        assert is_valid_contract(make_airdrop(contract=contract)) is False

    def test_valid_contract(self):
        assert is_valid_contract(make_airdrop()) is True

    async def test_invalid_contract_never_reaches_chain(self, chain: AsyncMock):
        engine = ClaimEngine(chain, proofs=proof_cache({}))
        drops = [make_airdrop(contract="0xnope"), make_merkle_airdrop(contract="bad")]
        result = await engine.scan([TARGET_A, TARGET_B], drops)

        assert result.actions == 0
        assert result.skipped == 4
        assert chain.mock_calls == []

    @pytest.mark.parametrize("contract", ["0" * 40, "2" * 40])
    def test_unprefixed_address_rejected(self, contract: str):
        assert is_valid_contract(make_airdrop(contract=contract)) is False

    async def test_unprefixed_zero_address_never_reaches_chain(self, chain: AsyncMock):
        dataset = make_dataset({TARGET_A: {"index": 0, "amount": "50", "proof": []}})
        engine = ClaimEngine(chain, proofs=proof_cache({"proofs/merkle.json": dataset}))
        drops = [make_merkle_airdrop(contract="0" * 40), make_airdrop(contract="2" * 40)]
        result = await engine.scan([TARGET_A], drops)

        assert result.actions == 0
        assert result.skipped == 2
        assert chain.mock_calls == []


class TestDispatch:
    async def test_unknown_type_skipped(self, chain: AsyncMock):
        engine = ClaimEngine(chain, proofs=proof_cache({}))
        result = await engine.scan([TARGET_A], [make_airdrop(type="vesting")])

        assert result.actions == 0
        assert result.skipped == 1
        assert chain.mock_calls == []

    async def test_unknown_type_strict_raises(self, chain: AsyncMock):
        engine = ClaimEngine(chain, proofs=proof_cache({}), strict_protocols=True)
        with pytest.raises(UnsupportedProtocolError, match="vesting"):
            await engine.scan([TARGET_A], [make_airdrop(type="vesting")])

    async def test_custom_strategy_table(self, chain: AsyncMock):
        custom = MagicMock()
        custom.check = AsyncMock(return_value=None)
        engine = ClaimEngine(chain, strategies={"simple": custom})
        drop = make_airdrop()
        await engine.scan([TARGET_A], [drop])
        custom.check.assert_awaited_once_with(drop, TARGET_A)


class TestScanOrdering:
    async def test_outcomes_target_major_airdrop_minor(self, chain: AsyncMock):
        chain.read_claimable.return_value = 10
        claims = {
            TARGET_A: {"index": 0, "amount": "1", "proof": [PROOF_NODE]},
            TARGET_B: {"index": 1, "amount": "2", "proof": [PROOF_NODE]},
        }
        engine = ClaimEngine(chain, proofs=proof_cache({"proofs/merkle.json": make_dataset(claims)}))
        result = await engine.scan([TARGET_A, TARGET_B], [make_airdrop(), make_merkle_airdrop()])

        pairs = [(o.target, o.airdrop_id) for o in result.outcomes]
        assert pairs == [
            (TARGET_A, "drop-simple"),
            (TARGET_A, "drop-merkle"),
            (TARGET_B, "drop-simple"),
            (TARGET_B, "drop-merkle"),
        ]
        assert result.actions == 4

    async def test_failure_stops_remaining_pairs(self, chain: AsyncMock):
        chain.read_claimable.side_effect = ConnectionError("rpc down")
        engine = ClaimEngine(chain, proofs=proof_cache({}))
        with pytest.raises(ConnectionError):
            await engine.scan([TARGET_A, TARGET_B], [make_airdrop(), make_airdrop(id="second")])
        assert chain.read_claimable.await_count == 1

    async def test_dry_outcome_counts_as_action(self, chain: AsyncMock, dry_airdrop):
        cache = proof_cache({"proofs/merkle.json": make_dataset(
            {TARGET_A: {"index": 0, "amount": "50", "proof": []}}
        )})
        engine = ClaimEngine(chain, proofs=cache)
        result = await engine.scan([TARGET_A], [dry_airdrop])

        assert result.actions == 1
        assert result.outcomes[0].dry is True
        assert chain.mock_calls == []


class TestProofCaching:
    async def test_dataset_loaded_once_per_run(self, chain: AsyncMock):
        loader = MagicMock(return_value=make_dataset({}))
        engine = ClaimEngine(chain, proofs=ProofCache(loader=loader))
        await engine.scan([TARGET_A, TARGET_B], [make_merkle_airdrop()])
        assert loader.call_count == 1

    async def test_dataset_reloaded_on_next_scan(self, chain: AsyncMock):
        loader = MagicMock(return_value=make_dataset({}))
        engine = ClaimEngine(chain, proofs=ProofCache(loader=loader))
        await engine.scan([TARGET_A], [make_merkle_airdrop()])
        await engine.scan([TARGET_A], [make_merkle_airdrop()])
        assert loader.call_count == 2

    async def test_failed_load_cached_for_run(self, chain: AsyncMock):
        loader = MagicMock(return_value=None)
        engine = ClaimEngine(chain, proofs=ProofCache(loader=loader))
        result = await engine.scan([TARGET_A, TARGET_B], [make_merkle_airdrop()])
        assert result.actions == 0
        assert loader.call_count == 1
