"""
Spreadsheet table source backed by openpyxl.
Reads every worksheet of an .xlsx workbook into an immutable Table.
"""

import logging
import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from apps.exchange.domain.exceptions import CorruptResource, ResourceMissing
from apps.exchange.domain.interfaces import Sheet, Table, TableSource


logger = logging.getLogger(__name__)


class XlsxTableSource(TableSource):
    """
    Opens an .xlsx workbook read-only.
    Cell values are returned as openpyxl computes them: numbers, text, or
    datetimes for date-formatted cells.
    """

    def open_table(self, resource_path: str) -> Table:
        path = Path(resource_path)
        if not path.is_file():
            logger.error("Historical rates file not found: %s", path)
            raise ResourceMissing(f"Resource '{path}' not found")

        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, SyntaxError) as e:
            logger.error("Failed to open workbook %s: %s", path, e)
            raise CorruptResource(f"Resource '{path}' is not a readable workbook: {e}") from e

        try:
            sheets = tuple(
                Sheet(
                    name=worksheet.title,
                    rows=tuple(tuple(row) for row in worksheet.iter_rows(values_only=True)),
                )
                for worksheet in workbook.worksheets
            )
        except (zipfile.BadZipFile, KeyError, ValueError, SyntaxError) as e:
            logger.error("Failed to read worksheets of %s: %s", path, e)
            raise CorruptResource(f"Resource '{path}' has unreadable worksheets: {e}") from e
        finally:
            workbook.close()

        if not sheets:
            raise CorruptResource(f"Resource '{path}' contains no worksheets")

        logger.debug("Loaded %d sheet(s) from %s", len(sheets), path)
        return Table(sheets=sheets)
