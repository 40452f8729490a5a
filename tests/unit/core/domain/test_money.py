import pytest

from storefront_state.core.domain.shared import format_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        (1299, "1,299"),
        (1299.0, "1,299"),
        (74.5, "74.5"),
        (74.55, "74.55"),
        (1250000.75, "1,250,000.75"),
        (0.125, "0.125"),
        (0, "0"),
    ],
)
def test_format_amount_matches_storefront_rendering(value, expected):
    assert format_amount(value) == expected
