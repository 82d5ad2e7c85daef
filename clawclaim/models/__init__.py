from clawclaim.models.airdrop import (
    PROTOCOL_MERKLE,
    PROTOCOL_SIMPLE,
    ZERO_ADDRESS,
    AirdropDefinition,
    MerkleClaimEntry,
    MerkleProofDataset,
)
from clawclaim.models.outcome import ClaimOutcome, RunStatus, ScanResult

__all__ = [
    "AirdropDefinition",
    "MerkleClaimEntry",
    "MerkleProofDataset",
    "ClaimOutcome",
    "RunStatus",
    "ScanResult",
    "PROTOCOL_SIMPLE",
    "PROTOCOL_MERKLE",
    "ZERO_ADDRESS",
]
