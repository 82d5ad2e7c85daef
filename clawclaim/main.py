"""Entry point for a single ClawClaim scan.

Meant to run as a scheduled job (cron, systemd timer). Exit code 1 on any
fatal error; the stored run status is only updated by a completed scan.
"""

import asyncio
import sys

from loguru import logger

from clawclaim.chain.client import Web3ChainClient
from clawclaim.claims.engine import ClaimEngine
from clawclaim.db.redis import close_redis, get_redis
from clawclaim.notify.notifier import Notifier, build_notifier
from clawclaim.notify.report import ReportMeta
from clawclaim.registry.loader import load_airdrops, load_targets
from clawclaim.runner import run_once
from clawclaim.state.status import StatusTracker
from clawclaim.state.store import FileStatusStore, RedisStatusStore, StatusStore
from clawclaim.utils.logger import setup_logger
from config.settings import settings


async def build_status_store() -> StatusStore:
    if settings.status_backend == "redis":
        redis = await get_redis(settings.redis_url)
        return RedisStatusStore(redis, settings.status_key)
    if settings.status_backend == "file":
        return FileStatusStore(settings.status_file)
    raise ValueError(f"Unknown status backend: {settings.status_backend!r}")


async def main() -> int:
    setup_logger(json_logs=settings.json_logs, level=settings.log_level)

    if not settings.rpc_url or not settings.private_key:
        logger.error("Missing BASE_SEPOLIA_RPC (or RPC_URL) or PRIVATE_KEY in .env")
        return 1

    chain: Web3ChainClient | None = None
    notifier: Notifier | None = None
    try:
        chain = Web3ChainClient.from_rpc(
            settings.rpc_url, settings.private_key, timeout=settings.rpc_timeout_sec
        )
        notifier = build_notifier(
            settings.notify_channel,
            neynar_api_key=settings.neynar_api_key,
            neynar_signer_uuid=settings.neynar_signer_uuid,
            telegram_bot_token=settings.telegram_bot_token,
            telegram_chat_id=settings.telegram_chat_id,
        )
        meta = ReportMeta.now(chain.address, settings.network_label, settings.agent_name)

        targets = load_targets(settings.users_file)
        airdrops = load_airdrops(settings.airdrops_file)
        logger.info(f"[RUN] {len(targets)} target(s), {len(airdrops)} airdrop(s) on {settings.network_label}")

        await run_once(
            engine=ClaimEngine(chain, strict_protocols=settings.strict_protocols),
            tracker=StatusTracker(await build_status_store()),
            notifier=notifier,
            targets=targets,
            airdrops=airdrops,
            meta=meta,
        )
    except Exception:
        logger.exception("Run failed")
        return 1
    finally:
        if notifier is not None:
            await notifier.close()
        if chain is not None:
            await chain.close()
        await close_redis()

    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
