import math
from decimal import ROUND_HALF_UP, Context, Decimal

import pandas as pd

TWO_PLACES = Decimal('0.01')
# Wide enough for any float quantized to two places
FIXED_CONTEXT = Context(prec=400)


def numeric_values(dataset, column):
    """Finite numbers of a column in record order; other cells are skipped"""
    return [cell.number for cell in dataset.cells(column) if cell.is_number]


def format_fixed(value):
    """Two-decimal string, ties rounded away from zero"""
    value = float(value)
    if not math.isfinite(value):
        return 'NaN' if math.isnan(value) else ('Infinity' if value > 0 else '-Infinity')
    return str(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP, context=FIXED_CONTEXT))


class StatisticsAnalyzer:
    """Dataset-wide counters plus sum/mean/min/max for each numeric column"""

    def analyze(self, dataset, classification):
        statistics = {
            'total_rows': len(dataset),
            'total_columns': len(dataset.first_record),
            'numeric_columns': len(classification.numeric),
            'categorical_columns': len(classification.categorical),
        }

        for column in classification.numeric:
            values = numeric_values(dataset, column)
            if not values:
                continue

            series = pd.Series(values, dtype='float64')
            statistics[f'{column}_avg'] = format_fixed(series.mean())
            statistics[f'{column}_min'] = format_fixed(series.min())
            statistics[f'{column}_max'] = format_fixed(series.max())
            statistics[f'{column}_sum'] = format_fixed(series.sum())

        return statistics
