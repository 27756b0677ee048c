import json
import logging
import mimetypes
import sys

from analyzers.chart_selector import ChartSelector
from analyzers.data_type_analyzer import DataTypeAnalyzer
from analyzers.statistics_analyzer import StatisticsAnalyzer
from models import AnalysisResult, Dataset
from parsers.file_parser import FileParserFactory
from utils.data_insights import DataInsights

NO_DATA_MESSAGE = 'No structured data found'


class AnalysisError(Exception):
    """Raised when an uploaded file cannot be processed at all"""

    def __init__(self, reason):
        self.reason = str(reason)
        super().__init__(f"Failed to process file: {self.reason}")


def read_bytes(source):
    """Accept raw bytes or a readable binary stream"""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, 'read'):
        content = source.read()
        if isinstance(content, str):
            raise TypeError("expected a binary stream, got text")
        return bytes(content)
    raise TypeError(f"cannot read bytes from {type(source).__name__}")


class AnalysisPipeline:
    def __init__(self):
        self.parser_factory = FileParserFactory()
        self.data_type_analyzer = DataTypeAnalyzer()
        self.statistics_analyzer = StatisticsAnalyzer()
        self.chart_selector = ChartSelector()

    def run(self, source, media_type, filename):
        """
        Run the full analysis for one uploaded file and return an AnalysisResult
        """
        logging.info(f"Analyzing file: name={filename!r}, type={media_type!r}")

        try:
            content = read_bytes(source)
        except Exception as e:
            logging.error(f"Could not read {filename!r}: {str(e)}")
            raise AnalysisError(e) from e

        try:
            parser = self.parser_factory.get_parser(media_type, filename)
            records = parser.parse(content, filename or '')
            logging.info(f"Parsed data rows: {len(records)}")
            return self.analyze_records(records)
        except Exception as e:
            logging.exception(f"Error analyzing {filename!r}")
            raise AnalysisError(e) from e

    def analyze_records(self, records):
        """Turn extracted records into charts, statistics and insights"""
        dataset = Dataset(records)
        filtered = dataset.meaningful()

        if filtered.is_empty:
            return AnalysisResult(
                charts=[],
                statistics={'message': NO_DATA_MESSAGE, 'file_processed': True},
                raw_data=dataset,
                insights=DataInsights.no_data_insights(),
            )

        classification = self.data_type_analyzer.analyze(filtered)
        statistics = self.statistics_analyzer.analyze(filtered, classification)
        charts = self.chart_selector.select(filtered, classification)
        insights = DataInsights.generate(len(filtered), classification)

        return AnalysisResult(
            charts=charts,
            statistics=statistics,
            raw_data=filtered,
            insights=insights,
        )


def analyze(file_bytes, declared_media_type, file_name):
    """Analyze one uploaded file; every call gets its own pipeline"""
    return AnalysisPipeline().run(file_bytes, declared_media_type, file_name)


def export_to_json(path, output_file=None):
    """
    Analyze a local file and write the result as JSON (stdout when no output file)
    """
    media_type, _ = mimetypes.guess_type(path)
    with open(path, 'rb') as f:
        result = analyze(f, media_type or '', path)

    payload = json.dumps(result.to_dict(), indent=4, ensure_ascii=False)
    if output_file is None:
        print(payload)
        return None

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(payload)
    return output_file


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 2:
        print("usage: python analysis_pipeline.py <file> [output.json]", file=sys.stderr)
        sys.exit(2)

    output = export_to_json(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
    if output:
        print(f"Analysis results saved to {output}")
