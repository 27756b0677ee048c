import logging
from abc import ABC, abstractmethod
from pathlib import PurePath

from models import make_record

# Encodings tried in order when decoding uploaded text; latin-1 never fails
TEXT_ENCODINGS = ['utf-8-sig', 'cp1252', 'latin-1']

PDF = 'pdf'
CSV = 'csv'
EXCEL = 'excel'
DOCUMENT = 'document'
TEXT = 'text'


def detect_format(media_type, filename):
    """Pick an extraction strategy from the declared media type and file name"""
    media_type = (media_type or '').lower()
    suffix = PurePath((filename or '').lower()).suffix

    if media_type == 'application/pdf' or suffix == '.pdf':
        return PDF
    if media_type == 'text/csv' or suffix == '.csv':
        return CSV
    if 'spreadsheet' in media_type or 'excel' in media_type or suffix in ('.xlsx', '.xls'):
        return EXCEL
    if 'wordprocessingml' in media_type or 'msword' in media_type or suffix in ('.doc', '.docx'):
        return DOCUMENT
    return TEXT


def decode_text(content):
    """Best-effort decode of uploaded bytes"""
    for encoding in TEXT_ENCODINGS[:-1]:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    return content.decode(TEXT_ENCODINGS[-1])


def diagnostic_record(filename, file_type, message, error):
    """Single record describing why a file could not be parsed"""
    return make_record({
        'filename': filename,
        'type': file_type,
        'message': message,
        'error': str(error) or error.__class__.__name__,
    })


class BaseParser(ABC):
    """Abstract base class for file parsers"""

    @abstractmethod
    def parse(self, content, filename):
        """Parse file bytes and return a list of records"""
        pass

    @staticmethod
    def _clean_headers(columns):
        """Trim header names and name the unnamed ones"""
        headers = []
        for i, col in enumerate(columns):
            name = str(col).strip()
            if not name or name.startswith('Unnamed:'):
                name = f'Column_{i}'
            headers.append(name)
        return headers


class FileParserFactory:
    """Factory class to get appropriate parser for file type"""

    def __init__(self):
        from .csv_parser import CSVParser
        from .excel_parser import ExcelParser
        from .pdf_parser import PDFParser
        from .text_parser import DocumentParser, TextParser

        self.parsers = {
            PDF: PDFParser(),
            CSV: CSVParser(),
            EXCEL: ExcelParser(),
            DOCUMENT: DocumentParser(),
            TEXT: TextParser(),
        }

    def get_parser(self, media_type, filename):
        """Get parser for the detected format; unknown types fall through to text"""
        file_format = detect_format(media_type, filename)
        logging.debug(f"Detected format '{file_format}' for {filename!r} (media type {media_type!r})")
        return self.parsers[file_format]
