"""
Document Insight Analyzer Setup Instructions

To run this application on your local system:

1. Install Python 3.11+ if not already installed

2. Create a virtual environment:
   python -m venv insight_env

3. Activate the virtual environment:
   - Windows: insight_env\\Scripts\\activate
   - Mac/Linux: source insight_env/bin/activate

4. Install the package and its requirements:
   pip install -e .            (add ".[test]" for pytest)

5. Set environment variables (optional):
   - SESSION_SECRET=your-secret-key-here
   - MAX_UPLOAD_MB=50 (default)
   - APP_ENV=production (hides error tracebacks from API responses)
   - LOG_LEVEL=INFO (default DEBUG)

6. Run the application:
   python app.py

   Or with gunicorn:
   gunicorn --bind 0.0.0.0:5000 --reuse-port --reload app:app

7. Upload a file:
   curl -F "file=@data.csv" http://localhost:5000/api/analyze

   Or analyze a local file without the web server:
   python analysis_pipeline.py data.csv results.json

File Structure:
├── app.py                      # Flask app configuration
├── routes.py                   # Upload API route
├── models.py                   # Cells, datasets, charts, results
├── analysis_pipeline.py        # analyze(): parse -> classify -> stats -> charts -> insights
├── analyzers/
│   ├── data_type_analyzer.py   # Numeric / categorical classification
│   ├── statistics_analyzer.py  # Row/column counters and per-column metrics
│   └── chart_selector.py       # Histogram, trend, pie and count charts
├── parsers/
│   ├── file_parser.py          # Format detection, base parser, factory
│   ├── csv_parser.py           # CSV parser
│   ├── excel_parser.py         # Excel parser
│   ├── pdf_parser.py           # PDF text extraction
│   └── text_parser.py          # Free-text heuristic, Word documents
└── utils/
    └── data_insights.py        # Narrative insights
"""
from setuptools import setup

setup(
    name="document-insight-analyzer",
    version="0.1.0",
    description="Turns uploaded CSV, Excel, text and PDF files into statistics, chart specs and insights",
    python_requires=">=3.9",
    packages=["parsers", "analyzers", "utils"],
    py_modules=["app", "routes", "models", "analysis_pipeline"],
    install_requires=[
        "Flask>=2.3",
        "Werkzeug>=2.3",
        "pandas>=2.0",
        "numpy>=1.25",
        "openpyxl>=3.1",
        "xlrd>=2.0.1",
        "pdfplumber>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
