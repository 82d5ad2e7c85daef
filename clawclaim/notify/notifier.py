"""Notification channels for scan reports.

Every notifier exposes `post_message(text) -> bool` and never raises:
a failed post is logged and reported as False so the run can finish.
"""

from __future__ import annotations

from typing import Protocol

import httpx
from loguru import logger

NEYNAR_CAST_URL = "https://api.neynar.com/v2/farcaster/cast"
TELEGRAM_API_URL = "https://api.telegram.org"


class Notifier(Protocol):
    async def post_message(self, text: str) -> bool: ...

    async def close(self) -> None: ...


class FarcasterNotifier:
    """Posts casts through the Neynar API with a managed signer."""

    def __init__(self, api_key: str = "", signer_uuid: str = "", timeout: float = 10.0) -> None:
        self._api_key = api_key
        self._signer_uuid = signer_uuid
        self._timeout = timeout
        self._http: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._api_key and self._signer_uuid)

    async def post_message(self, text: str) -> bool:
        if not self.enabled:
            logger.info("[NOTIFY] Skipping Farcaster post (missing NEYNAR_API_KEY or NEYNAR_SIGNER_UUID)")
            return False

        try:
            if not self._http:
                self._http = httpx.AsyncClient(timeout=self._timeout)
            resp = await self._http.post(
                NEYNAR_CAST_URL,
                headers={"accept": "application/json", "api_key": self._api_key},
                json={"signer_uuid": self._signer_uuid, "text": text},
            )
        except Exception as e:
            logger.warning(f"[NOTIFY] Farcaster post failed: {e}")
            return False

        if resp.status_code != 200:
            logger.warning(f"[NOTIFY] Cast failed: HTTP {resp.status_code}: {resp.text[:200]}")
            return False

        try:
            cast_hash = (resp.json().get("cast") or {}).get("hash")
        except ValueError:
            cast_hash = None
        logger.info(f"[NOTIFY] Cast posted: {cast_hash or '?'}")
        return True

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None


class TelegramNotifier:
    """Sends the report to one chat via the Bot API."""

    def __init__(self, bot_token: str = "", chat_id: int = 0, timeout: float = 10.0) -> None:
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._timeout = timeout
        self._http: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._bot_token and self._chat_id)

    async def post_message(self, text: str) -> bool:
        if not self.enabled:
            logger.info("[NOTIFY] Skipping Telegram post (missing TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID)")
            return False

        try:
            if not self._http:
                self._http = httpx.AsyncClient(timeout=self._timeout)
            resp = await self._http.post(
                f"{TELEGRAM_API_URL}/bot{self._bot_token}/sendMessage",
                json={
                    "chat_id": self._chat_id,
                    "text": text,
                    "disable_web_page_preview": True,
                },
            )
        except Exception as e:
            logger.warning(f"[NOTIFY] Telegram send failed: {e}")
            return False

        if resp.status_code != 200:
            logger.warning(f"[NOTIFY] Telegram send failed: HTTP {resp.status_code}: {resp.text[:200]}")
            return False
        logger.info("[NOTIFY] Telegram message sent")
        return True

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None


class LogNotifier:
    """Writes the message to the log instead of posting it."""

    async def post_message(self, text: str) -> bool:
        logger.info(f"[NOTIFY] Message:\n{text}")
        return True

    async def close(self) -> None:
        return None


def build_notifier(
    channel: str,
    *,
    neynar_api_key: str = "",
    neynar_signer_uuid: str = "",
    telegram_bot_token: str = "",
    telegram_chat_id: int = 0,
) -> Notifier:
    if channel == "farcaster":
        return FarcasterNotifier(neynar_api_key, neynar_signer_uuid)
    if channel == "telegram":
        return TelegramNotifier(telegram_bot_token, telegram_chat_id)
    if channel == "log":
        return LogNotifier()
    raise ValueError(f"Unknown notify channel: {channel!r}")
