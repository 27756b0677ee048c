import io
import logging

import pdfplumber

from .file_parser import BaseParser, diagnostic_record
from .text_parser import TextParser

PDF_ERROR_MESSAGE = 'PDF parsing encountered an error. Trying alternative extraction...'


class PDFParser(BaseParser):
    """Parser for PDF documents, run through the free-text heuristic"""

    def __init__(self):
        self.text_parser = TextParser(sniff_delimited=False)

    def parse(self, content, filename):
        try:
            text = self.extract_text(content)
        except Exception as e:
            logging.error(f"Error extracting text from PDF {filename}: {str(e)}")
            return [diagnostic_record(filename, 'PDF', PDF_ERROR_MESSAGE, e)]

        logging.info(f"Extracted {len(text)} characters of text from {filename}")
        return self.text_parser.parse_text(text)

    def extract_text(self, content):
        """Join the text of every page"""
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return '\n'.join(page.extract_text() or '' for page in pdf.pages)
