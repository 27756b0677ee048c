import logging

import numpy as np
import pandas as pd

from models import ChartDescriptor, ChartType, HistogramBin, Series
from .statistics_analyzer import numeric_values

BIN_COUNT = 10
TREND_POINTS = 50
MAX_CATEGORICAL_COLUMNS = 3
MAX_CATEGORIES = 10


def create_bins(values, bin_count=BIN_COUNT):
    """Equal-width histogram over [min, max]; the last bin absorbs the maximum"""
    data = np.asarray(values, dtype='float64')
    low = float(data.min())
    high = float(data.max())
    width = (high - low) / bin_count

    if width > 0 and np.isfinite(width):
        indices = np.floor((data - low) / width)
        indices = np.clip(np.nan_to_num(indices), 0, bin_count - 1).astype(int)
    else:
        # All values equal: everything lands in the first bin
        indices = np.zeros(len(data), dtype=int)

    counts = np.bincount(indices, minlength=bin_count)
    return [
        HistogramBin(min=low + i * width, max=low + (i + 1) * width, count=int(counts[i]))
        for i in range(bin_count)
    ]


def rank_categories(cells, limit=MAX_CATEGORIES):
    """Count trimmed labels and keep the most frequent, ties in first-seen order"""
    labels = pd.Series([cell.label() for cell in cells], dtype='object')
    labels = labels[labels != '']
    if labels.empty:
        return []

    counts = labels.groupby(labels, sort=False).size().sort_values(ascending=False, kind='stable')
    return [{'name': name, 'value': int(count)} for name, count in counts.head(limit).items()]


class ChartSelector:
    """Derives chart descriptors from classified columns"""

    def select(self, dataset, classification):
        charts = []

        for column in classification.numeric:
            charts.extend(self._numeric_charts(column, numeric_values(dataset, column)))

        for column in classification.categorical[:MAX_CATEGORICAL_COLUMNS]:
            charts.extend(self._categorical_charts(column, dataset.cells(column)))

        logging.info(f"Selected {len(charts)} charts")
        return charts

    def _numeric_charts(self, column, values):
        if not values:
            return []

        bins = create_bins(values)
        charts = [ChartDescriptor(
            type=ChartType.BAR,
            title=f"Distribution of {column}",
            data=[{'name': b.name, 'value': b.count} for b in bins],
            series=[Series('value', 'Frequency')],
        )]

        if len(values) > 1:
            charts.append(ChartDescriptor(
                type=ChartType.LINE,
                title=f"Trend of {column}",
                data=[{'name': f"Item {i + 1}", 'value': value} for i, value in enumerate(values[:TREND_POINTS])],
                series=[Series('value', column)],
            ))

        return charts

    def _categorical_charts(self, column, cells):
        ranked = rank_categories(cells)
        if not ranked:
            return []

        return [
            ChartDescriptor(
                type=ChartType.PIE,
                title=f"Distribution of {column}",
                data=[dict(row) for row in ranked],
            ),
            ChartDescriptor(
                type=ChartType.BAR,
                title=f"Count by {column}",
                data=[dict(row) for row in ranked],
                series=[Series('value', 'Count')],
            ),
        ]
