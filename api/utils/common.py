"""
Common utility functions used across multiple routes and services.
"""

import math
from datetime import datetime


def iso_format(dt: datetime) -> str:
    """Format datetime as ISO string with Z suffix."""
    return dt.isoformat() + "Z"


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round(66.5) == 67, unlike builtin round)."""
    return int(math.floor(value + 0.5))


def last_messages(messages: list[dict] | None, limit: int) -> list[dict]:
    """Tail of a chat transcript as {role, content} pairs, oldest first."""
    if not messages or limit <= 0:
        return []
    return [{"role": m.get("role"), "content": m.get("content")} for m in messages[-limit:]]
