import io
import logging

import pandas as pd

from models import make_record
from .file_parser import BaseParser, diagnostic_record


class ExcelParser(BaseParser):
    """Parser for Excel files (.xls and .xlsx)"""

    def parse(self, content, filename):
        """Parse the first sheet of an Excel workbook and return records"""
        try:
            with pd.ExcelFile(io.BytesIO(content)) as excel_file:
                sheet_name = excel_file.sheet_names[0]
                df = excel_file.parse(sheet_name=sheet_name, dtype=object)
        except Exception as e:
            logging.error(f"Error parsing Excel file {filename}: {str(e)}")
            return [diagnostic_record(filename, 'Excel', 'Spreadsheet parsing encountered an error.', e)]

        df.columns = self._clean_headers(df.columns)
        records = [self._row_to_record(row) for row in df.to_dict(orient='records')]
        logging.info(f"Using sheet '{sheet_name}' with {len(records)} rows")
        return records

    def _row_to_record(self, row):
        """Convert a sheet row, leaving out its empty cells"""
        return make_record({key: value for key, value in row.items() if not self._is_blank(value)})

    @staticmethod
    def _is_blank(value):
        if isinstance(value, str):
            return value == ''
        try:
            return bool(pd.isna(value))
        except (TypeError, ValueError):
            return False
