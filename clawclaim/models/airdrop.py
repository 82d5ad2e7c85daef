"""Pydantic models for the airdrop registry and merkle proof datasets."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

PROTOCOL_SIMPLE = "simple"
PROTOCOL_MERKLE = "merkle"


class AirdropDefinition(BaseModel):
    """One entry of the airdrop registry.

    `contract` and `type` are kept as raw strings: address validation and
    protocol dispatch are the engine's decisions, not the parser's.
    """

    id: str = "unknown"
    name: str = ""
    token_symbol: str = Field("", alias="tokenSymbol")
    contract: str = ""
    type: str = ""
    proofs: str | None = None  # path to the merkle proof dataset

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_dry_run(self) -> bool:
        """Zero-address contract: report what would be claimed, never transact."""
        return self.contract.lower().removeprefix("0x") == ZERO_ADDRESS[2:]


class MerkleClaimEntry(BaseModel):
    """Claim tuple for one address: index, amount (wei, as string in JSON), proof."""

    index: int = Field(ge=0)
    amount: int = Field(ge=0)
    proof: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class MerkleProofDataset(BaseModel):
    """Proof dataset of one merkle airdrop, keyed by address.

    Accepts both `{"claims": {...}}` and a bare address -> entry mapping.
    """

    claims: dict[str, MerkleClaimEntry] = Field(default_factory=dict)

    _lower_index: dict[str, MerkleClaimEntry] = PrivateAttr(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_mapping(cls, data: Any) -> Any:
        if isinstance(data, dict) and "claims" not in data:
            return {"claims": data}
        return data

    def model_post_init(self, __context: Any) -> None:
        self._lower_index = {addr.lower(): entry for addr, entry in self.claims.items()}

    def get_exact(self, address: str) -> MerkleClaimEntry | None:
        return self.claims.get(address)

    def get_normalized(self, address: str) -> MerkleClaimEntry | None:
        """Case-insensitive lookup over all dataset keys."""
        return self._lower_index.get(address.lower())

    def __len__(self) -> int:
        return len(self.claims)
