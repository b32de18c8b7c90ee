import pytest
import zipfile
from datetime import datetime
from decimal import Decimal

from openpyxl import Workbook

from apps.exchange.domain.exceptions import CorruptResource, ResourceMissing
from apps.exchange.domain.historical import HistoricalRateResolver
from apps.exchange.infrastructure.spreadsheets.xlsx import XlsxTableSource


@pytest.fixture
def source():
    return XlsxTableSource()


def rewrite_member(path, member, transform):
    """Copy an .xlsx archive in place, passing one member through transform."""
    with zipfile.ZipFile(path) as archive:
        entries = [(info, archive.read(info.filename)) for info in archive.infolist()]
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as archive:
        for info, data in entries:
            if info.filename == member:
                data = transform(data)
            archive.writestr(info, data)


class TestXlsxTableSource:
    """Tests for the openpyxl backed table source."""

    def test_open_table_reads_all_sheets_in_order(self, source, rates_workbook):
        table = source.open_table(str(rates_workbook))

        assert [sheet.name for sheet in table.sheets] == ["2017", "2018"]
        assert table.sheets[0].rows[0] == ("Date", "USD", "EUR", "RUB", "KZT", "CNY")
        assert table.sheets[0].rows[2][:2] == (42777, "3,75")
        assert table.sheets[1].rows[1][1] == 3.5

    def test_missing_file(self, source, tmp_path):
        with pytest.raises(ResourceMissing):
            source.open_table(str(tmp_path / "absent.xlsx"))

    def test_directory_is_missing_resource(self, source, tmp_path):
        with pytest.raises(ResourceMissing):
            source.open_table(str(tmp_path))

    def test_not_a_workbook(self, source, tmp_path):
        path = tmp_path / "dailyrus.xlsx"
        path.write_text("date;usd\n42777;3,75\n", encoding="utf-8")

        with pytest.raises(CorruptResource):
            source.open_table(str(path))

    def test_truncated_sheet_xml(self, source, rates_workbook):
        rewrite_member(rates_workbook, "xl/worksheets/sheet1.xml", lambda data: data[: len(data) // 2])

        with pytest.raises(CorruptResource):
            source.open_table(str(rates_workbook))

    def test_malformed_workbook_xml(self, source, rates_workbook):
        rewrite_member(rates_workbook, "xl/workbook.xml", lambda data: b"<workbook \x00 not xml")

        with pytest.raises(CorruptResource):
            source.open_table(str(rates_workbook))

    def test_unsupported_extension(self, source, tmp_path):
        path = tmp_path / "dailyrus.csv"
        path.write_text("date,usd\n", encoding="utf-8")

        with pytest.raises(CorruptResource):
            source.open_table(str(path))


class TestResolverWithWorkbook:
    """End-to-end lookups against a real .xlsx file."""

    def test_lookup_from_workbook(self, rates_workbook):
        resolver = HistoricalRateResolver(XlsxTableSource(), str(rates_workbook))

        assert resolver.lookup("2017", "11.02.17", "USD") == Decimal("3.75")
        assert resolver.lookup("2018", "05.03.18", "CNY") == Decimal("0.5531")

    def test_lookup_date_formatted_cells(self, tmp_path):
        """
        Test that cells formatted as dates (returned as datetime) also match.
        """
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = "2017"
        worksheet.append([datetime(2017, 2, 11), "3,75", "3,99", "0,064", "0,0118", "0,545"])
        path = tmp_path / "dated.xlsx"
        workbook.save(path)

        resolver = HistoricalRateResolver(XlsxTableSource(), str(path))

        assert resolver.lookup("2017", "11.02.17", "KZT") == Decimal("0.0118")
