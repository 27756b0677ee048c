import logging

from models import ColumnClassification

NUMERIC_THRESHOLD = 0.7


class DataTypeAnalyzer:
    """Analyzer for classifying dataset columns as numeric or categorical"""

    def __init__(self, numeric_threshold=NUMERIC_THRESHOLD):
        self.numeric_threshold = numeric_threshold

    def analyze(self, dataset):
        """Classify every column of the first record.

        A column is numeric when more than ``numeric_threshold`` of its
        non-empty values are finite numbers. Columns without a single
        non-empty value are left out of both lists.
        """
        numeric = []
        categorical = []

        for column in dataset.first_record:
            label = self._classify_column(dataset.cells(column))
            if label == 'numeric':
                numeric.append(column)
            elif label == 'categorical':
                categorical.append(column)
            else:
                logging.debug(f"Column '{column}' has no values, skipping")

        logging.info(f"Classified {len(numeric)} numeric and {len(categorical)} categorical columns")
        return ColumnClassification(numeric=numeric, categorical=categorical)

    def _classify_column(self, cells):
        """Return 'numeric', 'categorical', or None for an empty column"""
        values = [cell for cell in cells if not cell.is_empty]
        if not values:
            return None

        numeric_count = sum(1 for cell in values if cell.is_number)
        if numeric_count > len(values) * self.numeric_threshold:
            return 'numeric'
        return 'categorical'
