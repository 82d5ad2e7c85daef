from __future__ import annotations

from clawclaim.models.airdrop import MerkleClaimEntry, MerkleProofDataset


def resolve_claim_entry(
    dataset: MerkleProofDataset | None, address: str
) -> MerkleClaimEntry | None:
    """Find the claim entry for `address` in one airdrop's proof dataset.

    Exact-case key wins, then the lowercased key, then any key that matches
    case-insensitively. A dataset that failed to load (None) resolves to absent.
    """
    if dataset is None:
        return None

    entry = dataset.get_exact(address)
    if entry is None:
        entry = dataset.get_exact(address.lower())
    if entry is None:
        entry = dataset.get_normalized(address)
    return entry
