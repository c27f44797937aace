from datetime import date

import pytest

from pghostel.core.exceptions import ValidationError
from pghostel.utils.date_utils import current_month_token, parse_month_token


def test_parse_month_token():
    billing = parse_month_token("2024-02")

    assert (billing.year, billing.month) == (2024, 2)
    assert billing.month_name == "February"
    assert billing.due_date() == date(2024, 2, 5)
    assert billing.due_date(31) == date(2024, 2, 29)


@pytest.mark.parametrize(
    "token",
    ["2024-2", "2024-13", "24-02", "2024/02", " 2024-02", "2024-02\n", "2024-02 ", None, 202402],
)
def test_parse_month_token_rejects_malformed(token):
    with pytest.raises(ValidationError) as excinfo:
        parse_month_token(token)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "month is required in YYYY-MM format"


def test_current_month_token():
    assert current_month_token(date(2024, 5, 31)) == "2024-05"
