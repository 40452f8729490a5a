import time
from datetime import UTC, datetime
from uuid import uuid4


def now_ms() -> int:
    """Epoch milliseconds, the resolution stored in added_at / viewed_at."""
    return int(time.time() * 1000)


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid4())
