"""Runtime configuration: tracker server settings and optional rule tables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .models import SiteRule
from .utils import uniq_preserve_order

log = logging.getLogger(__name__)

load_dotenv()

DEFAULT_SERVER_URL = "https://jobtrackpro-production.up.railway.app"
DEFAULT_TIMEOUT_S = 20.0
SESSION_COOKIE_NAME = "connect.sid"

SELECTOR_FIELDS = ("company", "position", "location")


class Settings(BaseModel):
    server_url: str = DEFAULT_SERVER_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    session_cookie: Optional[str] = None

    @property
    def cookies(self) -> Dict[str, str]:
        if not self.session_cookie:
            return {}
        return {SESSION_COOKIE_NAME: self.session_cookie}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings() -> Settings:
    """Read settings from the environment (and `.env`, if present)."""
    timeout_raw = get_env("JOBTRACKER_TIMEOUT_S")
    try:
        timeout_s = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S
    except ValueError:
        log.warning("Ignoring invalid JOBTRACKER_TIMEOUT_S=%r", timeout_raw)
        timeout_s = DEFAULT_TIMEOUT_S

    return Settings(
        server_url=get_env("JOBTRACKER_SERVER_URL", DEFAULT_SERVER_URL).rstrip("/"),
        timeout_s=timeout_s,
        session_cookie=get_env("JOBTRACKER_SESSION_COOKIE") or None,
    )


def _rule_from_mapping(entry: Dict[str, Any]) -> SiteRule:
    if not isinstance(entry, dict):
        raise ValueError(f"site rule entries must be mappings, got {entry!r}")
    data = dict(entry)
    patterns = data.get("url_patterns") or []
    if isinstance(patterns, str):
        patterns = [patterns]
    data["url_patterns"] = tuple(uniq_preserve_order(patterns))
    for field in SELECTOR_FIELDS:
        data[field] = tuple(uniq_preserve_order(data.get(field) or []))
    return SiteRule(**data)


def load_site_rules(path: Union[str, Path]) -> Tuple[SiteRule, ...]:
    """Load an ordered site-rule table from YAML.

    Expected shape::

        sites:
          - site_id: lever
            name: Lever
            url_patterns: [jobs.lever.co]
            company: [".main-header-text a", ".company-name"]
            position: [".posting-headline h2"]
            location: [".posting-categories .location"]

    Raises:
        ValueError: if the file has no `sites` list.
        pydantic.ValidationError: if an entry is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("sites") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a top-level 'sites' list")

    rules = tuple(_rule_from_mapping(entry) for entry in entries)
    log.info("Loaded %d site rules from %s", len(rules), path)
    return rules
