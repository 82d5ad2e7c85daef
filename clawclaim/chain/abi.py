"""Minimal ABIs for the two supported claim protocols."""

SIMPLE_CLAIM_ABI = [
    {
        "inputs": [{"name": "account", "type": "address"}],
        "name": "claimable",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "claimReward",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

MERKLE_DISTRIBUTOR_ABI = [
    {
        "inputs": [{"name": "index", "type": "uint256"}],
        "name": "isClaimed",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "index", "type": "uint256"},
            {"name": "account", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "merkleProof", "type": "bytes32[]"},
        ],
        "name": "claim",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]
