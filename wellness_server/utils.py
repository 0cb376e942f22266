"""Pure helpers: response envelopes, anonymous tokens, request logging."""

import secrets
import time
from typing import Any, Dict, Optional

from wellness_engine.models.scoring import utc_now_iso

_TOKEN_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


def anonymous_token() -> str:
    """Opaque per-request token: anon_<epoch ms>_<random base36>."""
    suffix = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(6))
    return f"anon_{int(time.time() * 1000)}_{suffix}"


def success_envelope(data: Any = None, **extra: Any) -> Dict[str, Any]:
    """{success: true, data, timestamp} plus any extra top-level keys."""
    out: Dict[str, Any] = {"success": True}
    if data is not None:
        out["data"] = data
    out.update(extra)
    out["timestamp"] = utc_now_iso()
    return out


def error_envelope(error: str, detail: Optional[Any] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": False, "error": error, "timestamp": utc_now_iso()}
    if detail is not None:
        out["detail"] = detail
    return out


def log_event(tag: str, msg: str) -> None:
    """Log to stdout with flush so container logs show it immediately."""
    print(f"[{tag}] {msg}", flush=True)
