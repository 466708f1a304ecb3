
from __future__ import annotations

import json
import math
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

from person_match.config import get_config
from person_match.matching import MatchSettings


def load_settings(*, thorough: bool = False) -> MatchSettings:
    """
    Matching thresholds from config, with the CLI's --thorough flag applied.
    """
    settings = MatchSettings.from_config(get_config().matching)
    if thorough:
        settings = replace(settings, thorough_fallback=True)
    return settings


def read_names(path: Path) -> List[str]:
    """One name per line; blank lines are skipped."""
    text = path.read_text(encoding="utf-8-sig")
    return [line.strip() for line in text.splitlines() if line.strip()]


def format_metric(value: float) -> str:
    if math.isnan(value):
        return "undefined"
    return f"{value:.4f}"


def write_json(data: Dict[str, Any], *, pretty: bool = True):
    """
    Write JSON to stdout.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    print(payload)
