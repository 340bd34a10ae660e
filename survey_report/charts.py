# survey_report/charts.py
# Plotly rendering for the survey bar charts. The three renderers below are
# called once per bucket while the figure is built; each returns None when an
# input it needs is missing, so the caller simply skips that element.
import logging
from typing import Dict, Optional, Sequence, Union

import plotly.graph_objects as go

from survey_report.config import (
    ACCENTS, AXIS_LINE_COLOR, BAR_CORNER_RADIUS, BAR_WIDTH, CHART_HEIGHT, CHART_MARGIN,
    COLORS, GRID_COLOR, LABEL_COLOR, LABEL_OFFSET_PX, TICK_COLOR,
)
from survey_report.data import CHART_PALETTE, DESCRIPTIONS, ChartType, ScoreBucket

logger = logging.getLogger(__name__)

Number = Union[int, float]

# -------------------- Renderers --------------------
def axis_tick(value: Optional[str], buckets: Sequence[ScoreBucket], wide: bool = True) -> Optional[str]:
    """Two-line x tick: the score label and, on wide layouts, its description."""
    if value is None:
        return None
    match = next((b for b in buckets if b.label == value), None)
    description = match.description if match else ""
    if not wide:
        return value
    return f"{value}<br><span style='font-size:10px'>{description}</span>"


def bar_label(x: Optional[Number], y: Optional[Number], width: Optional[Number],
              value: Optional[Union[int, str]]) -> Optional[Dict]:
    if x is None or y is None or width is None or value is None:
        return None
    return dict(
        x=x + width / 2, y=y, xref="x", yref="y",
        text=f"{value}명", showarrow=False,
        xanchor="center", yanchor="bottom", yshift=LABEL_OFFSET_PX,
        font=dict(color=LABEL_COLOR, size=12),
    )


def tooltip(active: bool, label: Optional[str], value: Optional[Union[int, str]],
            chart_type: ChartType) -> Optional[str]:
    if not active or not label or value is None:
        return None
    accent = ACCENTS[CHART_PALETTE[chart_type]]
    return (
        f"<b>{label} ({DESCRIPTIONS.get(label, '')})</b><br>"
        f"인원: <span style='color:{accent}'><b>{value}명</b></span>"
    )


# -------------------- Figure --------------------
def bar_chart(buckets: Sequence[ScoreBucket], chart_type: ChartType, wide: bool = True) -> go.Figure:
    labels = [b.label for b in buckets]
    counts = [b.count for b in buckets]
    color = COLORS[CHART_PALETTE[chart_type]]

    fig = go.Figure(go.Bar(
        x=labels, y=counts, width=BAR_WIDTH, name="인원",
        marker=dict(color=color, cornerradius=BAR_CORNER_RADIUS),
        hovertext=[tooltip(True, b.label, b.count, chart_type) for b in buckets],
        hovertemplate="%{hovertext}<extra></extra>",
        showlegend=False,
    ))

    # category i sits at axis position i; labels are centred over each bar
    annotations = []
    for i, b in enumerate(buckets):
        ann = bar_label(i - BAR_WIDTH / 2, b.count, BAR_WIDTH, b.count)
        if ann:
            annotations.append(ann)

    ymax = max(counts) if counts else 0
    fig.update_layout(
        height=CHART_HEIGHT, margin=CHART_MARGIN,
        plot_bgcolor="white", paper_bgcolor="white",
        annotations=annotations,
        hoverlabel=dict(bgcolor="white", bordercolor="#e5e7eb", font=dict(color="#1f2937")),
        xaxis=dict(tickmode="array", tickvals=labels,
                   ticktext=[axis_tick(l, buckets, wide) for l in labels],
                   tickfont=dict(color=TICK_COLOR), showline=True, linecolor=AXIS_LINE_COLOR,
                   ticks="", showgrid=False),
        yaxis=dict(title=dict(text="응답자 수 (명)", font=dict(color=LABEL_COLOR, size=14)),
                   ticksuffix="명", tickfont=dict(color=COLORS["text"], size=12),
                   range=[0, max(ymax, 1) * 1.2], showline=True, linecolor=AXIS_LINE_COLOR,
                   ticks="", showgrid=True, gridcolor=GRID_COLOR, griddash="dash", zeroline=False),
    )
    logger.debug("Built %s chart with %d bars", chart_type.value, len(buckets))
    return fig
