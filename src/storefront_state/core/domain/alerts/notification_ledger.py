from collections.abc import Iterator


class NotificationLedger:
    """Ids already notified during this session.

    Monotonic: ids are only ever added. Lives in memory, so a new process
    starts with an empty ledger.
    """

    def __init__(self) -> None:
        self._notified: set[str] = set()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._notified

    def __len__(self) -> int:
        return len(self._notified)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._notified))

    def record(self, item_id: str) -> None:
        self._notified.add(item_id)
