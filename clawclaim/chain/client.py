"""Chain client — read-only contract calls and claim transaction submission.

The engine depends only on the ChainClient protocol. Web3ChainClient is the
EVM implementation: one local signing account, one AsyncWeb3 connection.
Private key is loaded ONCE and never logged; only the address is shown.

Errors are NOT caught here: an RPC or signing failure must abort the run.
"""

from __future__ import annotations

from typing import Protocol

from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from clawclaim.chain.abi import MERKLE_DISTRIBUTOR_ABI, SIMPLE_CLAIM_ABI


class ChainClient(Protocol):
    async def read_claimable(self, contract: str, target: str) -> int: ...

    async def submit_simple_claim(self, contract: str) -> str: ...

    async def read_is_claimed(self, contract: str, index: int) -> bool: ...

    async def submit_merkle_claim(
        self, contract: str, index: int, target: str, amount: int, proof: list[str]
    ) -> str: ...


class Web3ChainClient:
    """ChainClient over AsyncWeb3 with a local signing account."""

    def __init__(self, w3: AsyncWeb3, account: LocalAccount) -> None:
        self._w3 = w3
        self._account = account

    @classmethod
    def from_rpc(cls, rpc_url: str, private_key: str, timeout: float = 30.0) -> Web3ChainClient:
        if not rpc_url:
            raise ValueError("RPC URL is empty")
        if not private_key:
            raise ValueError("Private key is empty")

        w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
        account = Account.from_key(private_key)
        logger.info(f"[CHAIN] Loaded agent account: {account.address}")
        return cls(w3, account)

    def __repr__(self) -> str:
        return f"Web3ChainClient(agent={self.address})"

    @property
    def address(self) -> str:
        return self._account.address

    def _contract(self, address: str, abi: list[dict]):
        return self._w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    async def read_claimable(self, contract: str, target: str) -> int:
        fn = self._contract(contract, SIMPLE_CLAIM_ABI).functions.claimable(
            Web3.to_checksum_address(target)
        )
        return int(await fn.call())

    async def submit_simple_claim(self, contract: str) -> str:
        fn = self._contract(contract, SIMPLE_CLAIM_ABI).functions.claimReward()
        return await self._transact(fn)

    async def read_is_claimed(self, contract: str, index: int) -> bool:
        fn = self._contract(contract, MERKLE_DISTRIBUTOR_ABI).functions.isClaimed(index)
        return bool(await fn.call())

    async def submit_merkle_claim(
        self, contract: str, index: int, target: str, amount: int, proof: list[str]
    ) -> str:
        fn = self._contract(contract, MERKLE_DISTRIBUTOR_ABI).functions.claim(
            index,
            Web3.to_checksum_address(target),
            amount,
            [Web3.to_bytes(hexstr=node) for node in proof],
        )
        return await self._transact(fn)

    async def _transact(self, fn) -> str:
        """Build, sign and broadcast. Returns the 0x-prefixed tx hash without waiting for a receipt."""
        nonce = await self._w3.eth.get_transaction_count(self.address, "pending")
        tx = await fn.build_transaction({"from": self.address, "nonce": nonce})
        signed = self._account.sign_transaction(tx)
        tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    async def is_connected(self) -> bool:
        return await self._w3.is_connected()

    async def chain_id(self) -> int:
        return await self._w3.eth.chain_id

    async def get_balance(self) -> int:
        """Agent balance in wei."""
        return await self._w3.eth.get_balance(self.address)

    async def close(self) -> None:
        await self._w3.provider.disconnect()
