from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from models.preset import Domain


PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(slots=True)
class AppConfig:
    presets_dir: Path
    rules_dir: Path
    log_dir: Path
    log_level: str
    default_domain: Domain


def _resolve_path(value: str | None, fallback: str) -> Path:
    candidate = Path(value or fallback)
    if not candidate.is_absolute():
        candidate = PROJECT_ROOT / candidate
    return candidate


def _parse_domain(value: str | None) -> Domain:
    raw = (value or Domain.ARTICLE.value).strip().lower()
    try:
        return Domain(raw)
    except ValueError as exc:
        available = ", ".join(domain.value for domain in Domain)
        raise ValueError(f"Unknown DEFAULT_DOMAIN '{raw}'. Available domains: {available}") from exc


def load_config(env_file: str | os.PathLike[str] | None = None) -> AppConfig:
    """Load configuration values from a .env file and environment variables."""

    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    log_dir = _resolve_path(os.getenv("LOG_DIR"), "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    return AppConfig(
        presets_dir=_resolve_path(os.getenv("PRESETS_DIR"), "presets"),
        rules_dir=_resolve_path(os.getenv("RULES_DIR"), "rules"),
        log_dir=log_dir,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        default_domain=_parse_domain(os.getenv("DEFAULT_DOMAIN")),
    )
