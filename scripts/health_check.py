"""Pre-flight health check — reports what the next scan would run against.

Checks:
- RPC connectivity, chain id and agent balance
- Registry sizes, invalid contracts, dry-run (0x0) entries, unsupported types
- Proof datasets of merkle airdrops (loadable, entry count)
- Stored run status

Usage:
    python scripts/health_check.py
    python scripts/health_check.py --skip-rpc
"""

import argparse
import asyncio
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from clawclaim.chain.client import Web3ChainClient  # noqa: E402
from clawclaim.claims.engine import is_valid_contract  # noqa: E402
from clawclaim.db.redis import close_redis  # noqa: E402
from clawclaim.main import build_status_store  # noqa: E402
from clawclaim.models.airdrop import PROTOCOL_MERKLE, PROTOCOL_SIMPLE  # noqa: E402
from clawclaim.registry.loader import load_airdrops, load_proof_dataset, load_targets  # noqa: E402
from clawclaim.state.status import StatusTracker  # noqa: E402
from config.settings import settings  # noqa: E402

STATUS_OK = "OK"
STATUS_WARN = "WARN"
STATUS_ERROR = "ERROR"


async def check_rpc(report: dict) -> None:
    if not settings.rpc_url or not settings.private_key:
        report["checks"]["rpc"] = {"status": STATUS_ERROR, "error": "RPC URL or private key not set"}
        return

    chain = Web3ChainClient.from_rpc(settings.rpc_url, settings.private_key, settings.rpc_timeout_sec)
    try:
        if not await chain.is_connected():
            report["checks"]["rpc"] = {"status": STATUS_ERROR, "error": "not connected"}
            return
        report["checks"]["rpc"] = {
            "status": STATUS_OK,
            "chain_id": await chain.chain_id(),
            "agent": chain.address,
            "balance_wei": str(await chain.get_balance()),
        }
    except Exception as e:
        report["checks"]["rpc"] = {"status": STATUS_ERROR, "error": str(e)}
    finally:
        await chain.close()


def check_registries(report: dict) -> None:
    try:
        targets = load_targets(settings.users_file)
        airdrops = load_airdrops(settings.airdrops_file)
    except Exception as e:
        report["checks"]["registries"] = {"status": STATUS_ERROR, "error": str(e)}
        return

    invalid = [a.id for a in airdrops if not is_valid_contract(a)]
    dry = [a.id for a in airdrops if is_valid_contract(a) and a.is_dry_run]
    unsupported = [a.id for a in airdrops if a.type not in (PROTOCOL_SIMPLE, PROTOCOL_MERKLE)]

    proofs: dict[str, dict] = {}
    for airdrop in airdrops:
        if airdrop.type != PROTOCOL_MERKLE:
            continue
        dataset = load_proof_dataset(airdrop.proofs) if airdrop.proofs else None
        proofs[airdrop.id] = {
            "status": STATUS_OK if dataset is not None else STATUS_WARN,
            "entries": len(dataset) if dataset is not None else 0,
        }

    warn = invalid or unsupported or any(p["status"] != STATUS_OK for p in proofs.values())
    report["checks"]["registries"] = {
        "status": STATUS_WARN if warn else STATUS_OK,
        "targets": len(targets),
        "airdrops": len(airdrops),
        "invalid_contracts": invalid,
        "dry_run": dry,
        "unsupported_types": unsupported,
        "proofs": proofs,
    }


async def check_status(report: dict) -> None:
    try:
        tracker = StatusTracker(await build_status_store())
        previous = await tracker.load()
        report["checks"]["status"] = {
            "status": STATUS_OK,
            "backend": settings.status_backend,
            "last_status": previous.value,
        }
    except Exception as e:
        report["checks"]["status"] = {"status": STATUS_ERROR, "error": str(e)}
    finally:
        await close_redis()


async def main() -> int:
    parser = argparse.ArgumentParser(description="ClawClaim pre-flight health check")
    parser.add_argument("--skip-rpc", action="store_true", help="Do not contact the RPC endpoint")
    args = parser.parse_args()

    report: dict = {"timestamp": datetime.now(UTC).isoformat(), "checks": {}}
    if not args.skip_rpc:
        await check_rpc(report)
    check_registries(report)
    await check_status(report)

    print(json.dumps(report, indent=2))
    failed = any(c.get("status") == STATUS_ERROR for c in report["checks"].values())
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
