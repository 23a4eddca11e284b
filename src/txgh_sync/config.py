"""Configuration management for the sync bot."""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

LANG_PLACEHOLDER = "<lang>"

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"


def _get_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(key: str) -> tuple[str, ...]:
    value = os.getenv(key, "")
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Config:
    """Bot configuration, built once from environment variables."""

    # Transifex
    tx_base_url: str = "https://www.transifex.com"
    tx_username: str = ""
    tx_password: str = ""
    tx_project_slug: str = ""
    tx_resource_reg: str = ""
    tx_resource_lang: str = "en"
    tx_resource_type: str = "PO"
    tx_resource_ext: str = ""
    tx_all_update: bool = False
    tx_target_path: str = ""
    tx_languages: tuple[str, ...] = field(default_factory=tuple)
    tx_verify_existing: bool = True
    tx_webhook_secret: str = ""
    tx_webhook_url: str = ""

    # GitHub
    github_api_url: str = "https://api.github.com"
    github_token: str = ""
    github_owner: str = ""
    github_repo: str = ""
    # Used both as the literal branch to update and as a regex filter on pushes
    github_branch: str = "main"
    github_webhook_secret: str = ""
    bot_pusher_pattern: str = r"\[bot\]"
    status_context: str = "txgh-sync"
    commit_message: str = "Update translations from transifex"

    # Runtime
    http_timeout: float = 30.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate required configuration."""
        required = {
            "TX_PROJECT_SLUG": self.tx_project_slug,
            "TX_RESOURCE_REG": self.tx_resource_reg,
            "TX_RESOURCE_LANG": self.tx_resource_lang,
            "TX_RESOURCE_EXT": self.tx_resource_ext,
            "TX_TARGET_PATH": self.tx_target_path,
            "GITHUB_TOKEN": self.github_token,
            "GITHUB_BRANCH": self.github_branch,
        }
        for name, value in required.items():
            if not value:
                raise ValueError(f"{name} environment variable is required")

        if LANG_PLACEHOLDER not in self.tx_target_path:
            raise ValueError(f"TX_TARGET_PATH must contain the {LANG_PLACEHOLDER} placeholder")

        try:
            re.compile(self.tx_resource_reg.replace(LANG_PLACEHOLDER, self.tx_resource_lang))
        except re.error as e:
            raise ValueError(f"TX_RESOURCE_REG is not a valid regular expression: {e}") from e

    def validate_webhook(self) -> None:
        """Validate settings needed by the translation-ready webhook and resync."""
        if not self.github_owner or not self.github_repo:
            raise ValueError("GITHUB_OWNER and GITHUB_REPO environment variables are required")


def load_config() -> Config:
    """Read the configuration from the environment (and .env, when present)."""
    load_dotenv(env_path)

    return Config(
        tx_base_url=os.getenv("TX_BASE_URL", "https://www.transifex.com").rstrip("/"),
        tx_username=os.getenv("TX_USERNAME", ""),
        tx_password=os.getenv("TX_PASSWORD", ""),
        tx_project_slug=os.getenv("TX_PROJECT_SLUG", ""),
        tx_resource_reg=os.getenv("TX_RESOURCE_REG", ""),
        tx_resource_lang=os.getenv("TX_RESOURCE_LANG", "en"),
        tx_resource_type=os.getenv("TX_RESOURCE_TYPE", "PO"),
        tx_resource_ext=os.getenv("TX_RESOURCE_EXT", ""),
        tx_all_update=_get_bool("TX_ALL_UPDATE", False),
        tx_target_path=os.getenv("TX_TARGET_PATH", ""),
        tx_languages=_get_list("TX_LANGUAGES"),
        tx_verify_existing=_get_bool("TX_VERIFY_EXISTING", True),
        tx_webhook_secret=os.getenv("TX_WEBHOOK_SECRET", ""),
        tx_webhook_url=os.getenv("TX_WEBHOOK_URL", ""),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        github_token=os.getenv("GITHUB_TOKEN", ""),
        github_owner=os.getenv("GITHUB_OWNER", ""),
        github_repo=os.getenv("GITHUB_REPO", ""),
        github_branch=os.getenv("GITHUB_BRANCH", "main"),
        github_webhook_secret=os.getenv("GITHUB_WEBHOOK_SECRET", ""),
        bot_pusher_pattern=os.getenv("BOT_PUSHER_PATTERN", r"\[bot\]"),
        status_context=os.getenv("STATUS_CONTEXT", "txgh-sync"),
        commit_message=os.getenv("TX_COMMIT_MESSAGE", "Update translations from transifex"),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
