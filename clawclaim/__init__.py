"""ClawClaim — airdrop claim scanner."""

__version__ = "0.1.0"
