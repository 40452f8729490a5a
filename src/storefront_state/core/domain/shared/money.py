def format_amount(value: float) -> str:
    """Renders an amount the way the storefront shows prices: thousands
    separators and at most three fraction digits, trailing zeros dropped.

    >>> format_amount(1299.0)
    '1,299'
    >>> format_amount(74.5)
    '74.5'
    >>> format_amount(0.125)
    '0.125'
    """
    return f"{value:,.3f}".rstrip("0").rstrip(".")
