"""Tests for merkle claim entry lookup — case handling and missing data."""

from web3 import Web3

from clawclaim.claims.merkle_resolver import resolve_claim_entry
from clawclaim.models.airdrop import MerkleProofDataset
from tests.helpers import PROOF_NODE, make_dataset

LOWER = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
CHECKSUM = Web3.to_checksum_address(LOWER)


class TestResolveClaimEntry:
    def test_exact_key(self):
        ds = make_dataset({LOWER: {"index": 3, "amount": "50", "proof": [PROOF_NODE]}})
        entry = resolve_claim_entry(ds, LOWER)
        assert entry is not None
        assert entry.index == 3
        assert entry.amount == 50
        assert entry.proof == [PROOF_NODE]

    def test_lowercase_key_resolves_for_checksummed_target(self):
        ds = make_dataset({LOWER: {"index": 1, "amount": "7", "proof": []}})
        entry = resolve_claim_entry(ds, CHECKSUM)
        assert entry is not None
        assert entry.amount == 7

    def test_checksummed_key_resolves_for_lowercase_target(self):
        ds = make_dataset({CHECKSUM: {"index": 2, "amount": "9", "proof": []}})
        entry = resolve_claim_entry(ds, LOWER)
        assert entry is not None
        assert entry.index == 2

    def test_exact_case_wins_over_lowercase(self):
        ds = make_dataset({
            CHECKSUM: {"index": 10, "amount": "1", "proof": []},
            LOWER: {"index": 20, "amount": "2", "proof": []},
        })
        assert resolve_claim_entry(ds, CHECKSUM).index == 10
        assert resolve_claim_entry(ds, LOWER).index == 20

    def test_absent_address(self):
        ds = make_dataset({LOWER: {"index": 0, "amount": "1", "proof": []}})
        assert resolve_claim_entry(ds, "0x" + "12" * 20) is None

    def test_unloaded_dataset_is_absent(self):
        assert resolve_claim_entry(None, LOWER) is None


class TestMerkleProofDataset:
    def test_bare_mapping_accepted(self):
        ds = MerkleProofDataset.model_validate({LOWER: {"index": 0, "amount": "5", "proof": []}})
        assert len(ds) == 1
        assert ds.get_exact(LOWER).amount == 5

    def test_amount_keeps_full_precision(self):
        big = "123456789012345678901234567890"
        ds = make_dataset({LOWER: {"index": 0, "amount": big, "proof": []}})
        assert ds.get_exact(LOWER).amount == int(big)
        assert str(ds.get_exact(LOWER).amount) == big
