from typing import Any, Optional


def to_limit(raw: Any) -> int:
    """Best-effort integer for a limit; anything unparseable gives 0 (use the default)."""
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        return int(str(raw).strip())
    except ValueError:
        return 0


def clamp_limit(limit: Optional[int], *, default: int, maximum: int) -> int:
    """Missing, zero or negative -> ``default``; anything above ``maximum`` -> ``maximum``."""
    if not limit or limit < 1:
        return default
    return min(limit, maximum)


def parse_limit(raw: Optional[str], *, default: int, maximum: int) -> int:
    """Lenient query-string variant of ``clamp_limit``: junk falls back to ``default``."""
    return clamp_limit(to_limit(raw), default=default, maximum=maximum)
