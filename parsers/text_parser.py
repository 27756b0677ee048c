import logging
import re

from models import make_record
from .csv_parser import CSVParser
from .file_parser import BaseParser, decode_text

SNIPPET_LENGTH = 500

# "12, 3.5" or "7 42" style lines
NUMBER_LINE_PATTERN = re.compile(r'^\d+[\s,]+[\d.]+')
NUMBER_TOKEN_PATTERN = re.compile(r'[\d.]+')
LEADING_FLOAT_PATTERN = re.compile(r'\d+\.?\d*|\.\d+')


def parse_leading_float(token):
    """Parse the numeric prefix of a token, NaN when there is none"""
    match = LEADING_FLOAT_PATTERN.match(token)
    return float(match.group()) if match else float('nan')


class TextParser(BaseParser):
    """Heuristic parser that pulls key/value or number pairs out of free text"""

    def __init__(self, sniff_delimited=True):
        self.sniff_delimited = sniff_delimited
        self.csv_parser = CSVParser()

    def parse(self, content, filename):
        text = decode_text(content)

        if self.sniff_delimited and self._looks_delimited(text):
            try:
                records = self.csv_parser.parse_text(text)
            except Exception as e:
                logging.warning(f"Delimited parse of {filename} failed, using text heuristic: {str(e)}")
                records = []

            if records:
                return records

        return self.parse_text(text)

    def parse_text(self, text):
        """Extract records line by line; never returns an empty list"""
        records = []

        for line in text.split('\n'):
            if not line.strip():
                continue

            if ':' in line or '\t' in line:
                delimiter = ':' if ':' in line else '\t'
                parts = [part.strip() for part in line.split(delimiter)]

                if len(parts) >= 2:
                    pairs = {}
                    for i in range(0, len(parts) - 1, 2):
                        pairs[parts[i]] = parts[i + 1]
                    if pairs:
                        records.append(make_record(pairs))

            elif NUMBER_LINE_PATTERN.match(line):
                numbers = NUMBER_TOKEN_PATTERN.findall(line)
                if len(numbers) >= 2:
                    records.append(make_record({
                        'index': numbers[0],
                        'value': parse_leading_float(numbers[1]),
                    }))

        if records:
            logging.info(f"Text heuristic produced {len(records)} rows")
            return records

        return [make_record({'content': text[:SNIPPET_LENGTH]})]

    @staticmethod
    def _looks_delimited(text):
        return ',' in text and len(text.split('\n')) > 1


class DocumentParser(TextParser):
    """Word documents and other binaries: decode what we can and read it as text"""

    def __init__(self):
        super().__init__(sniff_delimited=False)
