"""Post a cast through Neynar using the configured signer.

Text comes from the command line arguments, or from stdin when none are given.

Usage:
    python scripts/farcaster_cast.py "gm from the claim agent"
    echo "multi-line text" | python scripts/farcaster_cast.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger  # noqa: E402

from clawclaim.notify.notifier import FarcasterNotifier  # noqa: E402
from clawclaim.utils.logger import setup_logger  # noqa: E402
from config.settings import settings  # noqa: E402


def read_text(argv: list[str]) -> str:
    if argv:
        return " ".join(argv).strip()
    return sys.stdin.read().strip()


async def main(argv: list[str]) -> int:
    setup_logger(level=settings.log_level, file_prefix="farcaster_cast")

    text = read_text(argv)
    if not text:
        logger.error('Usage: python scripts/farcaster_cast.py "your text" (or pipe text on stdin)')
        return 1

    notifier = FarcasterNotifier(settings.neynar_api_key, settings.neynar_signer_uuid)
    if not notifier.enabled:
        logger.error("Missing NEYNAR_API_KEY or NEYNAR_SIGNER_UUID")
        return 1

    try:
        ok = await notifier.post_message(text)
    finally:
        await notifier.close()
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
