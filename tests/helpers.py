"""Builders and constants shared by the test modules."""

from __future__ import annotations

from clawclaim.models.airdrop import AirdropDefinition, MerkleProofDataset
from clawclaim.registry.loader import ProofCache

TARGET_A = "0x1111111111111111111111111111111111111111"
TARGET_B = "0x4444444444444444444444444444444444444444"
SIMPLE_CONTRACT = "0x2222222222222222222222222222222222222222"
MERKLE_CONTRACT = "0x3333333333333333333333333333333333333333"
AGENT = "0x9999999999999999999999999999999999999999"
PROOF_NODE = "0x" + "ab" * 32


def make_airdrop(**kwargs) -> AirdropDefinition:
    defaults = {
        "id": "drop-simple",
        "name": "Test Drop",
        "tokenSymbol": "TST",
        "contract": SIMPLE_CONTRACT,
        "type": "simple",
    }
    defaults.update(kwargs)
    return AirdropDefinition.model_validate(defaults)


def make_merkle_airdrop(**kwargs) -> AirdropDefinition:
    defaults = {
        "id": "drop-merkle",
        "name": "Merkle Drop",
        "tokenSymbol": "MRK",
        "contract": MERKLE_CONTRACT,
        "type": "merkle",
        "proofs": "proofs/merkle.json",
    }
    defaults.update(kwargs)
    return make_airdrop(**defaults)


def make_dataset(claims: dict[str, dict]) -> MerkleProofDataset:
    return MerkleProofDataset.model_validate({"claims": claims})


def proof_cache(datasets: dict[str, MerkleProofDataset | None]) -> ProofCache:
    """ProofCache whose loader reads from an in-memory path -> dataset map."""
    return ProofCache(loader=lambda path: datasets.get(path))
