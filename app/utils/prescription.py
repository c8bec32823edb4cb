import re
from typing import Optional

_LEADING_NUMBER = re.compile(r"(\d+)")


def leading_int(text: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """First integer in a prescription string like "8-12" or "30 sec"."""
    if not text:
        return default
    match = _LEADING_NUMBER.search(text)
    return int(match.group(1)) if match else default
