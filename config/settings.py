from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Chain (Base Sepolia by default)
    rpc_url: str = Field(default="", validation_alias=AliasChoices("RPC_URL", "BASE_SEPOLIA_RPC"))
    private_key: str = ""  # Hex secret key — NEVER LOG THIS
    network_label: str = "Base Sepolia"
    rpc_timeout_sec: float = 30.0

    # Identity shown in casts
    agent_name: str = "ClawClaimAgent"

    # Registries
    users_file: str = "state/users.json"
    airdrops_file: str = "airdrops/base-sepolia.json"
    strict_protocols: bool = False  # Unknown airdrop "type" aborts the run instead of skipping

    # Run status persistence
    status_backend: str = "file"  # "file" or "redis"
    status_file: str = "state/status.json"
    redis_url: str = "redis://localhost:6379/0"
    status_key: str = "clawclaim:last_status"

    # Notifications
    notify_channel: str = "farcaster"  # "farcaster", "telegram" or "log"
    neynar_api_key: str = ""
    neynar_signer_uuid: str = ""
    telegram_bot_token: str = ""
    telegram_chat_id: int = 0

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
