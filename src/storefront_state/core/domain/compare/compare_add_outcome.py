from enum import StrEnum


class CompareAddOutcome(StrEnum):
    ADDED = "added"
    FULL = "full"
    DUPLICATE = "duplicate"

    @property
    def accepted(self) -> bool:
        return self is CompareAddOutcome.ADDED
