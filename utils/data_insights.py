TABLE_PREVIEW_ROWS = 100

NO_DATA_INSIGHTS = [
    'No structured data could be extracted from the file.',
    'The file may contain unstructured text or be in an unsupported format.',
    'Try uploading a CSV, Excel, or structured text file.',
]


class DataInsights:
    """Utility class for generating short observations about an analyzed file"""

    @staticmethod
    def generate(total_rows, classification):
        """Insights for a dataset with at least one meaningful row"""
        insights = [f"Analyzed {total_rows} rows of data"]

        numeric_count = len(classification.numeric)
        if numeric_count > 0:
            insights.append(f"Found {numeric_count} numeric column(s) for quantitative analysis")

        categorical_count = len(classification.categorical)
        if categorical_count > 0:
            insights.append(f"Found {categorical_count} categorical column(s) for distribution analysis")

        if total_rows > TABLE_PREVIEW_ROWS:
            insights.append(f"Large dataset detected - showing first {TABLE_PREVIEW_ROWS} rows in table view")

        return insights

    @staticmethod
    def no_data_insights():
        return list(NO_DATA_INSIGHTS)
