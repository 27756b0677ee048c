import io
import logging
import warnings

import pandas as pd

from models import is_meaningful, make_record
from .file_parser import BaseParser, decode_text, diagnostic_record

SEPARATORS = [',', ';', '\t', '|']


class CSVParser(BaseParser):
    """Parser for CSV files"""

    def parse(self, content, filename):
        """Parse CSV bytes and return records"""
        try:
            return self.parse_text(decode_text(content))
        except Exception as e:
            logging.error(f"Error parsing CSV file {filename}: {str(e)}")
            return [diagnostic_record(filename, 'CSV', 'CSV parsing encountered an error.', e)]

    def parse_text(self, text):
        """Parse delimited text with the first line as header"""
        sep = self._detect_separator(text)

        try:
            with warnings.catch_warnings():
                # Rows longer than the header keep only their leading fields; pandas warns about the rest
                warnings.simplefilter('ignore', pd.errors.ParserWarning)
                df = pd.read_csv(
                    io.StringIO(text),
                    sep=sep,
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=True,
                    index_col=False,
                    engine='python',
                )
        except pd.errors.EmptyDataError:
            logging.info("CSV input has no header row")
            return []

        df.columns = self._clean_headers(df.columns)
        records = [make_record(row) for row in df.to_dict(orient='records')]

        # Drop rows where every value is empty
        records = [record for record in records if is_meaningful(record)]
        logging.info(f"Successfully parsed CSV with separator='{sep}' into {len(records)} rows")
        return records

    def _detect_separator(self, text):
        """Choose the separator that splits the header line the most"""
        header = next((line for line in text.splitlines() if line.strip()), '')
        counts = {sep: header.count(sep) for sep in SEPARATORS}
        best = max(SEPARATORS, key=lambda sep: counts[sep])
        return best if counts[best] > 0 else ','
