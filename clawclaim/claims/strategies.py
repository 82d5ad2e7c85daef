"""Claim protocol strategies — one per airdrop `type`.

Each strategy checks a single (airdrop, target) pair and, when a reward is
available, submits the claim. Returns a ClaimOutcome or None.

Chain client errors are deliberately not caught: a failed read or write
leaves no record of which claims landed, so the whole run must abort.
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from clawclaim.chain.client import ChainClient
from clawclaim.claims.merkle_resolver import resolve_claim_entry
from clawclaim.models.airdrop import PROTOCOL_MERKLE, PROTOCOL_SIMPLE, AirdropDefinition
from clawclaim.models.outcome import ClaimOutcome
from clawclaim.registry.loader import ProofCache


class ClaimStrategy(Protocol):
    async def check(self, airdrop: AirdropDefinition, target: str) -> ClaimOutcome | None: ...


class SimpleClaimStrategy:
    """`claimable(address)` read, then `claimReward()` from the agent account."""

    def __init__(self, chain: ChainClient) -> None:
        self._chain = chain

    async def check(self, airdrop: AirdropDefinition, target: str) -> ClaimOutcome | None:
        if airdrop.is_dry_run:
            # Nothing may be sent to 0x0, and a claimable() read there returns no
            # data, which would raise and abort the whole run
            logger.info(f"[{airdrop.id}] Skipping {target}: simple airdrop on 0x0 has no amount source")
            return None

        amount = await self._chain.read_claimable(airdrop.contract, target)
        if amount <= 0:
            logger.info(f"[{airdrop.id}] No claim for {target}")
            return None

        logger.info(f"[{airdrop.id}] Claiming for {target} amount {amount}")
        tx_hash = await self._chain.submit_simple_claim(airdrop.contract)
        logger.info(f"[{airdrop.id}] Tx: {tx_hash}")

        return ClaimOutcome(
            airdrop_id=airdrop.id,
            airdrop_name=airdrop.name,
            token_symbol=airdrop.token_symbol,
            target=target,
            protocol=PROTOCOL_SIMPLE,
            amount=amount,
            tx_hash=tx_hash,
        )


class MerkleClaimStrategy:
    """Merkle distributor: proof lookup, `isClaimed(index)`, then `claim(...)`.

    A zero-address contract takes the dry path on every run: the entry is
    reported as claimable and the chain is never touched.
    """

    def __init__(self, chain: ChainClient, proofs: ProofCache) -> None:
        self._chain = chain
        self._proofs = proofs

    async def check(self, airdrop: AirdropDefinition, target: str) -> ClaimOutcome | None:
        dataset = self._proofs.get(airdrop)
        if dataset is None:
            logger.info(f"[{airdrop.id}] No proofs/claims found, skipping {target}")
            return None

        entry = resolve_claim_entry(dataset, target)
        if entry is None:
            logger.info(f"[{airdrop.id}] No merkle entry for {target}")
            return None

        if airdrop.is_dry_run:
            logger.info(
                f"[{airdrop.id}] Found merkle claim for {target} amount {entry.amount} "
                f"(DRY: contract is 0x0)"
            )
            return ClaimOutcome(
                airdrop_id=airdrop.id,
                airdrop_name=airdrop.name,
                token_symbol=airdrop.token_symbol,
                target=target,
                protocol=PROTOCOL_MERKLE,
                amount=entry.amount,
                dry=True,
            )

        if await self._chain.read_is_claimed(airdrop.contract, entry.index):
            logger.info(f"[{airdrop.id}] Already claimed index {entry.index} for {target}")
            return None

        logger.info(f"[{airdrop.id}] Claiming merkle for {target} amount {entry.amount}")
        tx_hash = await self._chain.submit_merkle_claim(
            airdrop.contract, entry.index, target, entry.amount, list(entry.proof)
        )
        logger.info(f"[{airdrop.id}] Tx: {tx_hash}")

        return ClaimOutcome(
            airdrop_id=airdrop.id,
            airdrop_name=airdrop.name,
            token_symbol=airdrop.token_symbol,
            target=target,
            protocol=PROTOCOL_MERKLE,
            amount=entry.amount,
            tx_hash=tx_hash,
        )
