import pytest

from services.errors import InvalidRequestError
from services.journals import validate_date


def test_validate_date_accepts_iso_dates():
    assert validate_date("2024-02-29") == "2024-02-29"


@pytest.mark.parametrize(
    "value",
    ["2024-1-5", "2024-01-5", "24-01-05", "2023-02-29", "2024-01-05T10:00", "", None],
)
def test_validate_date_rejects_other_formats(value):
    with pytest.raises(InvalidRequestError, match="Please use YYYY-MM-DD"):
        validate_date(value)
