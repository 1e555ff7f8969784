# tickmark/util/obs.py
from __future__ import annotations

import os
import sys
from typing import Any


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv("TICKMARK_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def obs_log(component: str, event: str, **fields: Any) -> None:
    """Write one `[tickmark.<component>] event k=v ...` line when TICKMARK_OBS_LOG is set."""
    if not obs_enabled():
        return
    kv = " ".join(f"{k}={v}" for k, v in fields.items())
    eprint(f"[tickmark.{component}] {event}" + (f" {kv}" if kv else ""))
