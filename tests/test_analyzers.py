import pytest

from analyzers.chart_selector import ChartSelector, create_bins, rank_categories
from analyzers.data_type_analyzer import DataTypeAnalyzer
from analyzers.statistics_analyzer import StatisticsAnalyzer, format_fixed, numeric_values
from models import ColumnClassification, Dataset, make_record
from utils.data_insights import DataInsights


def _dataset(rows):
    return Dataset(make_record(row) for row in rows)


def _column(name, values):
    return _dataset([{name: v} for v in values])


# ---------- classification ----------

def test_mostly_numeric_column_is_numeric():
    result = DataTypeAnalyzer().analyze(_column("v", ["1", "2", "x", "4", "5"]))
    assert result.numeric == ["v"]
    assert result.categorical == []


def test_mostly_text_column_is_categorical():
    result = DataTypeAnalyzer().analyze(_column("v", ["1", "x", "y", "z", "w"]))
    assert result.numeric == []
    assert result.categorical == ["v"]


def test_exactly_seventy_percent_is_not_numeric():
    values = ["1", "2", "3", "4", "5", "6", "7", "a", "b", "c"]
    assert DataTypeAnalyzer().analyze(_column("v", values)).categorical == ["v"]


def test_empty_values_are_ignored_and_empty_columns_skipped():
    ds = _dataset([
        {"n": "1", "blank": "", "label": "a"},
        {"n": "", "blank": None, "label": "b"},
        {"n": "3", "blank": "  ", "label": ""},
    ])
    result = DataTypeAnalyzer().analyze(ds)
    assert result.numeric == ["n"]
    assert result.categorical == ["label"]
    assert "blank" not in result.labels


def test_only_first_record_columns_are_classified():
    ds = _dataset([{"a": "1"}, {"a": "2", "late": "x"}])
    assert DataTypeAnalyzer().analyze(ds).labels == {"a": "numeric"}


# ---------- statistics ----------

def test_statistics_counters_and_metrics():
    ds = _dataset([
        {"qty": "1", "name": "a"},
        {"qty": "2", "name": "b"},
        {"qty": "3", "name": "c"},
        {"qty": "4", "name": "d"},
    ])
    classification = ColumnClassification(numeric=["qty"], categorical=["name"])
    stats = StatisticsAnalyzer().analyze(ds, classification)
    assert stats == {
        "total_rows": 4,
        "total_columns": 2,
        "numeric_columns": 1,
        "categorical_columns": 1,
        "qty_avg": "2.50",
        "qty_min": "1.00",
        "qty_max": "4.00",
        "qty_sum": "10.00",
    }


def test_statistics_round_ties_up():
    ds = _column("v", ["1.125", "1.125"])
    stats = StatisticsAnalyzer().analyze(ds, ColumnClassification(numeric=["v"], categorical=[]))
    assert stats["v_avg"] == "1.13"
    assert stats["v_sum"] == "2.25"


@pytest.mark.parametrize(
    "value,expected",
    [(0.375, "0.38"), (-2.625, "-2.63"), (2.5, "2.50"), (1e22, "10000000000000000000000.00")],
)
def test_format_fixed(value, expected):
    assert format_fixed(value) == expected


def test_numeric_values_skip_unparsable_entries():
    ds = _column("v", ["1.5", "x", "", "2.5", "1e999"])
    assert numeric_values(ds, "v") == [1.5, 2.5]


# ---------- histogram ----------

def test_bins_cover_range_and_absorb_maximum():
    values = [float(v) for v in range(11)]
    bins = create_bins(values)
    assert len(bins) == 10
    assert bins[0].min == 0.0
    assert bins[-1].max == pytest.approx(10.0)
    assert [b.count for b in bins] == [1, 1, 1, 1, 1, 1, 1, 1, 1, 2]


@pytest.mark.parametrize(
    "values",
    [
        [5.0],
        [2.0, 2.0, 2.0],
        [0.1, 0.2, 0.3, 0.7, 0.9, 1.0],
        [-1e6, 3.3, 7.7, 1e6, 1e6],
        [0.0, 1e-9, 3e-9],
    ],
)
def test_bin_counts_sum_to_value_count(values):
    bins = create_bins(values)
    assert sum(b.count for b in bins) == len(values)


def test_constant_column_lands_in_first_bin():
    bins = create_bins([4.0, 4.0, 4.0])
    assert bins[0].count == 3
    assert bins[0].name == "4.0-4.0"


# ---------- categories ----------

def test_rank_categories_orders_by_count_then_first_seen():
    ds = _column("c", ["b", "a", " a ", "c", "b", "a", None])
    ranked = rank_categories(ds.cells("c"))
    assert ranked == [
        {"name": "a", "value": 3},
        {"name": "b", "value": 2},
        {"name": "c", "value": 1},
        {"name": "Unknown", "value": 1},
    ]


def test_rank_categories_skips_whitespace_only_cells():
    ds = _column("c", ["a", "   ", "b", ""])
    ranked = rank_categories(ds.cells("c"))
    assert ranked == [
        {"name": "a", "value": 1},
        {"name": "b", "value": 1},
        {"name": "Unknown", "value": 1},
    ]


def test_rank_categories_keeps_top_ten():
    ds = _column("c", [f"v{i}" for i in range(15)])
    ranked = rank_categories(ds.cells("c"))
    assert [r["name"] for r in ranked] == [f"v{i}" for i in range(10)]


# ---------- chart selection ----------

def test_numeric_column_gets_distribution_and_trend():
    ds = _column("price", [str(v) for v in range(60)])
    classification = ColumnClassification(numeric=["price"])
    charts = ChartSelector().select(ds, classification)

    bar, line = charts
    assert bar.type.value == "bar"
    assert bar.title == "Distribution of price"
    assert [s.to_dict() for s in bar.series] == [{"key": "value", "name": "Frequency"}]
    assert sum(row["value"] for row in bar.data) == 60

    assert line.type.value == "line"
    assert line.title == "Trend of price"
    assert len(line.data) == 50
    assert line.data[0] == {"name": "Item 1", "value": 0.0}
    assert [s.to_dict() for s in line.series] == [{"key": "value", "name": "price"}]


def test_single_value_column_has_no_trend():
    charts = ChartSelector().select(_column("x", ["7"]), ColumnClassification(numeric=["x"]))
    assert [c.title for c in charts] == ["Distribution of x"]


def test_categorical_charts_capped_at_three_columns():
    rows = [{f"k{j}": f"v{i}" for j in range(1, 5)} for i in range(15)]
    classification = ColumnClassification(categorical=["k1", "k2", "k3", "k4"])
    charts = ChartSelector().select(_dataset(rows), classification)

    assert [c.title for c in charts] == [
        "Distribution of k1", "Count by k1",
        "Distribution of k2", "Count by k2",
        "Distribution of k3", "Count by k3",
    ]
    pie, bar = charts[0], charts[1]
    assert pie.type.value == "pie" and pie.series is None
    assert "series" not in pie.to_dict()
    assert len(pie.data) == 10
    assert bar.data == pie.data
    assert bar.to_dict()["series"] == [{"key": "value", "name": "Count"}]


# ---------- insights ----------

def test_insights_for_small_dataset():
    classification = ColumnClassification(numeric=["a", "b"], categorical=["c"])
    assert DataInsights.generate(12, classification) == [
        "Analyzed 12 rows of data",
        "Found 2 numeric column(s) for quantitative analysis",
        "Found 1 categorical column(s) for distribution analysis",
    ]


def test_insights_mention_table_preview_for_large_dataset():
    insights = DataInsights.generate(101, ColumnClassification(categorical=["c"]))
    assert insights == [
        "Analyzed 101 rows of data",
        "Found 1 categorical column(s) for distribution analysis",
        "Large dataset detected - showing first 100 rows in table view",
    ]
