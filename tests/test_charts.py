from survey_report.charts import axis_tick, bar_chart, bar_label, tooltip
from survey_report.config import ACCENTS, BAR_WIDTH, COLORS
from survey_report.data import SUBMISSION_DATA, USAGE_DATA, ChartType, ScoreBucket

# -------------------- axis_tick --------------------
def test_axis_tick_wide_shows_description():
    tick = axis_tick("3점", SUBMISSION_DATA, wide=True)
    assert tick.startswith("3점<br>")
    assert "보통이다" in tick

def test_axis_tick_narrow_shows_label_only():
    assert axis_tick("3점", SUBMISSION_DATA, wide=False) == "3점"

def test_axis_tick_unknown_label_has_empty_second_line():
    tick = axis_tick("9점", SUBMISSION_DATA, wide=True)
    assert tick == "9점<br><span style='font-size:10px'></span>"

def test_axis_tick_without_value():
    assert axis_tick(None, SUBMISSION_DATA) is None

# -------------------- bar_label --------------------
def test_bar_label_centred_above_bar():
    ann = bar_label(1.75, 6, 0.5, 6)
    assert ann["x"] == 2.0
    assert ann["y"] == 6
    assert ann["text"] == "6명"
    assert ann["yshift"] > 0

def test_bar_label_skips_missing_geometry():
    assert bar_label(None, 6, 0.5, 6) is None
    assert bar_label(1.0, None, 0.5, 6) is None
    assert bar_label(1.0, 6, None, 6) is None
    assert bar_label(1.0, 6, 0.5, None) is None

def test_bar_label_zero_count():
    assert bar_label(-0.25, 0, 0.5, 0)["text"] == "0명"

# -------------------- tooltip --------------------
def test_tooltip_usage_five():
    text = tooltip(True, "5점", 10, ChartType.USAGE)
    assert "매우 그렇다" in text
    assert "10명" in text
    assert ACCENTS["blue"] in text

def test_tooltip_accent_per_chart_type():
    assert ACCENTS["purple"] in tooltip(True, "1점", 1, ChartType.SUBMISSION)
    assert ACCENTS["teal"] in tooltip(True, "1점", 1, ChartType.ETHICS)

def test_tooltip_inactive_or_missing():
    assert tooltip(False, "5점", 10, ChartType.USAGE) is None
    assert tooltip(True, None, 10, ChartType.USAGE) is None
    assert tooltip(True, "5점", None, ChartType.USAGE) is None

# -------------------- bar_chart --------------------
def test_bar_chart_usage():
    fig = bar_chart(USAGE_DATA, ChartType.USAGE)
    bar = fig.data[0]
    assert list(bar.x) == ["1점", "2점", "3점", "4점", "5점"]
    assert list(bar.y) == [0, 1, 1, 6, 10]
    assert bar.marker.color == COLORS["blue"]
    assert "매우 그렇다" in bar.hovertext[4] and "10명" in bar.hovertext[4]
    texts = [a.text for a in fig.layout.annotations]
    assert texts == ["0명", "1명", "1명", "6명", "10명"]
    assert [a.x for a in fig.layout.annotations] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert fig.layout.yaxis.ticksuffix == "명"

def test_bar_chart_submission_ticks():
    wide = bar_chart(SUBMISSION_DATA, ChartType.SUBMISSION, wide=True)
    narrow = bar_chart(SUBMISSION_DATA, ChartType.SUBMISSION, wide=False)
    assert "보통이다" in wide.layout.xaxis.ticktext[2]
    assert narrow.layout.xaxis.ticktext[2] == "3점"
    assert wide.data[0].width == BAR_WIDTH

def test_bar_chart_all_zero_counts():
    empty = tuple(ScoreBucket(b.label, b.description, 0) for b in USAGE_DATA)
    fig = bar_chart(empty, ChartType.ETHICS)
    assert fig.layout.yaxis.range[1] > 0
    assert len(fig.layout.annotations) == 5
