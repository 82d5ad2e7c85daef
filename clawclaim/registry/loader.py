"""Registry loading — users, airdrops and per-airdrop merkle proof datasets.

Users and airdrops are required inputs: a missing or malformed file raises
RegistryError and the run never starts. Proof datasets are optional per
airdrop: a broken dataset is logged and treated as "no proofs".
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from clawclaim.claims.exceptions import RegistryError
from clawclaim.models.airdrop import AirdropDefinition, MerkleClaimEntry, MerkleProofDataset


def _read_json(path: str | Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryError(f"Cannot read {path}: {e}") from e


def load_targets(path: str | Path) -> list[str]:
    """Target addresses in registry order (keys of the `users` mapping)."""
    data = _read_json(path)
    users = data.get("users") if isinstance(data, dict) else None
    if not isinstance(users, dict):
        raise RegistryError(f"{path}: expected an object with a 'users' mapping")
    return list(users.keys())


def load_airdrops(path: str | Path) -> list[AirdropDefinition]:
    """Airdrop definitions in registry order. Malformed entries are dropped."""
    data = _read_json(path)
    entries = data.get("airdrops") if isinstance(data, dict) else None
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise RegistryError(f"{path}: 'airdrops' must be a list")

    airdrops: list[AirdropDefinition] = []
    for pos, raw in enumerate(entries):
        try:
            airdrops.append(AirdropDefinition.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"[REGISTRY] Dropping airdrop #{pos}: {e.error_count()} invalid field(s)")
    logger.debug(f"[REGISTRY] Loaded {len(airdrops)} airdrops from {path}")
    return airdrops


def load_proof_dataset(path: str | Path) -> MerkleProofDataset | None:
    """Parse a merkle proof dataset. Returns None when unreadable or not a mapping.

    Each claim entry is validated on its own; a malformed one is dropped with
    a warning so the other addresses in the file stay claimable.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"[REGISTRY] Failed to read proofs file: {path} ({e})")
        return None

    claims = data.get("claims", data) if isinstance(data, dict) else None
    if not isinstance(claims, dict):
        logger.error(f"[REGISTRY] Failed to read proofs file: {path} (expected an address mapping)")
        return None

    entries: dict[str, MerkleClaimEntry] = {}
    for address, raw in claims.items():
        try:
            entries[address] = MerkleClaimEntry.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"[REGISTRY] {path}: dropping claim for {address}: {e.error_count()} invalid field(s)")
    return MerkleProofDataset(claims=entries)


class ProofCache:
    """Per-run cache of parsed proof datasets, one load per airdrop.

    Failed loads are cached too so a broken file is reported once per run.
    """

    def __init__(
        self,
        loader: Callable[[str], MerkleProofDataset | None] = load_proof_dataset,
    ) -> None:
        self._loader = loader
        self._datasets: dict[tuple[str, str], MerkleProofDataset | None] = {}

    def get(self, airdrop: AirdropDefinition) -> MerkleProofDataset | None:
        if not airdrop.proofs:
            return None
        key = (airdrop.id, airdrop.proofs)
        if key not in self._datasets:
            self._datasets[key] = self._loader(airdrop.proofs)
        return self._datasets[key]

    def clear(self) -> None:
        self._datasets.clear()
