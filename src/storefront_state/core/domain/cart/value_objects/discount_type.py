from enum import StrEnum


class DiscountType(StrEnum):
    PERCENT = "percent"
    FIXED = "fixed"
