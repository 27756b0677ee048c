import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def to_json_value(obj):
    """Convert numpy/pandas scalars and other non-serializable objects to JSON-compatible types"""
    if obj is None:
        return None
    if isinstance(obj, (np.bool_, bool)):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (np.floating, float)):
        value = float(obj)
        return value if math.isfinite(value) else None
    if isinstance(obj, (pd.Timestamp, datetime, date)):
        if pd.isna(obj):
            return None
        return obj.isoformat()
    if isinstance(obj, str):
        return obj
    try:
        if pd.isna(obj):
            return None
    except (TypeError, ValueError):
        pass
    if hasattr(obj, 'item'):  # numpy scalars
        return obj.item()
    return obj


class CellKind(Enum):
    EMPTY = 'empty'
    TEXT = 'text'
    NUMBER = 'number'


@dataclass(frozen=True)
class Cell:
    """One value of a record: empty, text, or a finite number.

    ``raw`` keeps the JSON-safe original value so the record can be handed
    back to the caller unchanged, while ``number`` carries the parsed float
    for numeric cells.
    """
    kind: CellKind
    raw: Any = None
    number: Optional[float] = None

    @classmethod
    def parse(cls, value):
        """Build a cell from a raw scalar produced by an extractor"""
        raw = to_json_value(value)

        if raw is None:
            return cls(CellKind.EMPTY, None)

        # bool is an int subclass, so true/false count as 1/0
        if isinstance(raw, (int, float)):
            return cls(CellKind.NUMBER, raw, float(raw))

        if isinstance(raw, str):
            trimmed = raw.strip()
            if not trimmed:
                return cls(CellKind.EMPTY, raw)
            if NUMBER_PATTERN.match(trimmed):
                number = float(trimmed)
                if math.isfinite(number):
                    return cls(CellKind.NUMBER, raw, number)
            return cls(CellKind.TEXT, raw)

        return cls(CellKind.TEXT, str(raw))

    @property
    def is_empty(self):
        return self.kind is CellKind.EMPTY

    @property
    def is_number(self):
        return self.kind is CellKind.NUMBER

    def label(self):
        """Trimmed text used when counting categorical values; only missing cells read as Unknown"""
        if self.raw is None or self.raw == '':
            return 'Unknown'
        if isinstance(self.raw, bool):
            return 'true' if self.raw else 'false'
        if isinstance(self.raw, float) and self.raw.is_integer():
            return str(int(self.raw))
        return str(self.raw).strip()

    def to_json(self):
        return self.raw


EMPTY_CELL = Cell(CellKind.EMPTY)


def make_record(values):
    """Turn a mapping of raw scalars into a record of cells, keeping key order"""
    return {str(key): Cell.parse(value) for key, value in values.items()}


def is_meaningful(record):
    """A record counts only if at least one of its cells holds a value"""
    return any(not cell.is_empty for cell in record.values())


class Dataset:
    """Ordered records extracted from one uploaded file"""

    def __init__(self, records):
        self.records = list(records)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def is_empty(self):
        return len(self.records) == 0

    @property
    def first_record(self):
        return self.records[0] if self.records else {}

    @property
    def columns(self):
        """Union of column names in discovery order"""
        seen = {}
        for record in self.records:
            for key in record:
                seen.setdefault(key, None)
        return list(seen)

    def meaningful(self):
        return Dataset(record for record in self.records if is_meaningful(record))

    def cells(self, column):
        """Cells of a column across every record; a missing key reads as empty"""
        return [record.get(column, EMPTY_CELL) for record in self.records]

    def to_json(self):
        return [{key: cell.to_json() for key, cell in record.items()} for record in self.records]


@dataclass(frozen=True)
class ColumnClassification:
    numeric: List[str] = field(default_factory=list)
    categorical: List[str] = field(default_factory=list)

    @property
    def labels(self):
        labels = {column: 'numeric' for column in self.numeric}
        labels.update({column: 'categorical' for column in self.categorical})
        return labels


@dataclass(frozen=True)
class HistogramBin:
    min: float
    max: float
    count: int

    @property
    def name(self):
        return f"{self.min:.1f}-{self.max:.1f}"


class ChartType(str, Enum):
    BAR = 'bar'
    LINE = 'line'
    PIE = 'pie'
    AREA = 'area'
    SCATTER = 'scatter'


@dataclass(frozen=True)
class Series:
    key: str
    name: str

    def to_dict(self):
        return {'key': self.key, 'name': self.name}


@dataclass
class ChartDescriptor:
    type: ChartType
    title: str
    data: List[Dict[str, Any]]
    series: Optional[List[Series]] = None
    x_label: Optional[str] = None
    y_label: Optional[str] = None

    def to_dict(self):
        chart = {
            'type': self.type.value,
            'title': self.title,
            'data': [{key: to_json_value(value) for key, value in row.items()} for row in self.data],
        }
        if self.series is not None:
            chart['series'] = [series.to_dict() for series in self.series]
        if self.x_label is not None:
            chart['xLabel'] = self.x_label
        if self.y_label is not None:
            chart['yLabel'] = self.y_label
        return chart


@dataclass
class AnalysisResult:
    """Everything derived from one uploaded file"""
    charts: List[ChartDescriptor]
    statistics: Dict[str, Any]
    raw_data: Dataset
    insights: List[str]

    def to_dict(self):
        return {
            'charts': [chart.to_dict() for chart in self.charts],
            'statistics': {key: to_json_value(value) for key, value in self.statistics.items()},
            'rawData': self.raw_data.to_json(),
            'insights': list(self.insights),
        }
