import io

import pandas as pd
import pytest

from analysis_pipeline import AnalysisPipeline
from app import create_app


@pytest.fixture
def pipeline():
    return AnalysisPipeline()


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "SHOW_ERROR_DETAILS": True})
    with app.test_client() as client:
        yield client


@pytest.fixture
def make_xlsx():
    """Build workbook bytes from one or more named DataFrames (first one is the first sheet)."""

    def _build(**sheets):
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            for name, df in sheets.items():
                df.to_excel(writer, sheet_name=name, index=False)
        return buffer.getvalue()

    return _build


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePDF:
    def __init__(self, texts):
        self.pages = [FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    """Stand in for pdfplumber.open so tests don't need a real PDF."""

    def _install(*page_texts):
        monkeypatch.setattr(
            "parsers.pdf_parser.pdfplumber.open",
            lambda stream: FakePDF(page_texts),
        )

    return _install
