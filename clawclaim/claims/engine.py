"""Claim determination engine — walks every (target, airdrop) pair in order.

Targets are the outer loop, airdrops the inner one, and every chain call is
awaited before the next pair starts. All claims are signed by one account,
so submissions must never overlap without nonce coordination.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from loguru import logger
from web3 import Web3

from clawclaim.chain.client import ChainClient
from clawclaim.claims.exceptions import UnsupportedProtocolError
from clawclaim.claims.strategies import ClaimStrategy, MerkleClaimStrategy, SimpleClaimStrategy
from clawclaim.models.airdrop import PROTOCOL_MERKLE, PROTOCOL_SIMPLE, AirdropDefinition
from clawclaim.models.outcome import ScanResult
from clawclaim.registry.loader import ProofCache

_ADDRESS_SHAPE = re.compile(r"0x[0-9a-fA-F]{40}")


def is_valid_contract(airdrop: AirdropDefinition) -> bool:
    """`0x` + 40 hex digits, and a correct checksum when mixed-case.

    `Web3.is_address` alone also accepts the bare 40-hex form.
    """
    return bool(_ADDRESS_SHAPE.fullmatch(airdrop.contract)) and Web3.is_address(airdrop.contract)


class ClaimEngine:
    """Dispatches each pair to the strategy registered for the airdrop's type."""

    def __init__(
        self,
        chain: ChainClient,
        *,
        proofs: ProofCache | None = None,
        strategies: Mapping[str, ClaimStrategy] | None = None,
        strict_protocols: bool = False,
    ) -> None:
        self._proofs = proofs if proofs is not None else ProofCache()
        if strategies is None:
            strategies = {
                PROTOCOL_SIMPLE: SimpleClaimStrategy(chain),
                PROTOCOL_MERKLE: MerkleClaimStrategy(chain, self._proofs),
            }
        self._strategies = dict(strategies)
        self._strict = strict_protocols

    async def scan(
        self, targets: Iterable[str], airdrops: Iterable[AirdropDefinition]
    ) -> ScanResult:
        """Check every pair and collect outcomes in target-major order.

        Any chain client exception propagates unchanged and aborts the scan.
        """
        airdrops = list(airdrops)
        result = ScanResult()
        self._proofs.clear()

        for target in targets:
            for airdrop in airdrops:
                if not is_valid_contract(airdrop):
                    logger.info(f"[{airdrop.id}] Skipping: invalid contract address (target {target})")
                    result.skipped += 1
                    continue

                strategy = self._strategies.get(airdrop.type)
                if strategy is None:
                    if self._strict:
                        raise UnsupportedProtocolError(
                            f"Airdrop {airdrop.id!r} has unsupported type {airdrop.type!r}"
                        )
                    logger.warning(
                        f"[{airdrop.id}] Skipping: unsupported type {airdrop.type!r} (target {target})"
                    )
                    result.skipped += 1
                    continue

                outcome = await strategy.check(airdrop, target)
                if outcome is not None:
                    result.add(outcome)

        logger.info(f"[SCAN] Done: {result.actions} action(s), {result.skipped} skipped")
        return result
