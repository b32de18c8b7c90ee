import pytest
from unittest.mock import Mock

from openpyxl import Workbook


# Spreadsheet serial numbers (days since 1899-12-30)
SERIAL_2017_02_01 = 42767
SERIAL_2017_02_11 = 42777
SERIAL_2018_03_05 = 43164


@pytest.fixture
def pair_payload():
    """Successful /pair response body of the ExchangeRate API."""
    return {
        "result": "success",
        "documentation": "https://www.exchangerate-api.com/docs",
        "terms_of_use": "https://www.exchangerate-api.com/terms",
        "time_last_update_unix": 1716249601,
        "time_last_update_utc": "Tue, 21 May 2024 00:00:01 +0000",
        "time_next_update_unix": 1716336001,
        "time_next_update_utc": "Wed, 22 May 2024 00:00:01 +0000",
        "base_code": "USD",
        "target_code": "EUR",
        "conversion_rate": 0.9213,
        "conversion_result": 92.13,
    }


@pytest.fixture
def make_response():
    """Build a fake requests.Response."""
    def _make(json_data=None, status_code=200, content=b"{}", json_error=None):
        response = Mock()
        response.status_code = status_code
        response.content = content
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def rates_rows():
    """Rows of the historical spreadsheet: date, USD, EUR, RUB, KZT, CNY."""
    return {
        "2017": [
            ["Date", "USD", "EUR", "RUB", "KZT", "CNY"],
            [SERIAL_2017_02_01, "3,70", "3,95", "0,0610", "0,0115", "0,5400"],
            [SERIAL_2017_02_11, "3,75", "3,99", "0,0640", "0,0118", "0,5450"],
        ],
        "2018": [
            ["Date", "USD", "EUR", "RUB", "KZT", "CNY"],
            [SERIAL_2018_03_05, 3.5, 4.31, 0.0612, 0.0109, 0.5531],
        ],
    }


@pytest.fixture
def rates_workbook(tmp_path, rates_rows):
    """Write the historical rows to an .xlsx file and return its path."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in rates_rows.items():
        worksheet = workbook.create_sheet(title=name)
        for row in rows:
            worksheet.append(row)
    path = tmp_path / "dailyrus.xlsx"
    workbook.save(path)
    return path
