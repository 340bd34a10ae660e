# survey_report/data.py
from enum import Enum
from typing import Dict, Iterable, NamedTuple, Tuple

import pandas as pd

# -------------------- Likert scale --------------------
class ScoreLabel(Enum):
    ONE = "1점"
    TWO = "2점"
    THREE = "3점"
    FOUR = "4점"
    FIVE = "5점"

LIKERT_ORDER = [label.value for label in ScoreLabel]

DESCRIPTIONS: Dict[str, str] = {
    ScoreLabel.ONE.value: "전혀 그렇지 않다",
    ScoreLabel.TWO.value: "그렇지 않은 편이다",
    ScoreLabel.THREE.value: "보통이다",
    ScoreLabel.FOUR.value: "그런 편이다",
    ScoreLabel.FIVE.value: "매우 그렇다",
}

TOP_BOX = (ScoreLabel.FOUR.value, ScoreLabel.FIVE.value)
MIDDLE = (ScoreLabel.THREE.value,)
BOTTOM_BOX = (ScoreLabel.ONE.value, ScoreLabel.TWO.value)

# Every dataset was collected from the whole class (not checked at runtime)
SAMPLE_SIZE = 18


class ScoreBucket(NamedTuple):
    label: str
    description: str
    count: int


def _buckets(counts: Tuple[int, int, int, int, int]) -> Tuple[ScoreBucket, ...]:
    return tuple(ScoreBucket(label, DESCRIPTIONS[label], n) for label, n in zip(LIKERT_ORDER, counts))

# 문항 1 — 과제 수행에 생성형 AI 활용
USAGE_DATA = _buckets((0, 1, 1, 6, 10))
# 문항 2 — AI 산출물을 수정 없이 / 내 것처럼 제출
SUBMISSION_DATA = _buckets((1, 2, 3, 7, 5))
# 문항 3 — AI 결과물 제출이 문제되지 않는다는 인식
ETHICS_DATA = _buckets((1, 3, 7, 4, 3))


# -------------------- Chart types --------------------
class ChartType(Enum):
    USAGE = "usage"
    SUBMISSION = "submission"
    ETHICS = "ethics"

DATASETS: Dict[ChartType, Tuple[ScoreBucket, ...]] = {
    ChartType.USAGE: USAGE_DATA,
    ChartType.SUBMISSION: SUBMISSION_DATA,
    ChartType.ETHICS: ETHICS_DATA,
}

# palette key per chart type, see config.COLORS / config.ACCENTS
CHART_PALETTE: Dict[ChartType, str] = {
    ChartType.USAGE: "blue",
    ChartType.SUBMISSION: "purple",
    ChartType.ETHICS: "teal",
}


def dataset(name: str) -> Tuple[ScoreBucket, ...]:
    """Read access by name: "usage", "submission" or "ethics"."""
    return DATASETS[ChartType(name)]


# -------------------- Tabs --------------------
class Tab(Enum):
    INTRO = "intro"
    SURVEY = "survey"
    INTERVIEW = "interview"
    CONCLUSION = "conclusion"

TAB_TITLES: Dict[Tab, str] = {
    Tab.INTRO: "조사 개요",
    Tab.SURVEY: "설문 결과",
    Tab.INTERVIEW: "심층 인터뷰",
    Tab.CONCLUSION: "결론 및 제언",
}

DEFAULT_TAB = Tab.INTRO


# -------------------- Summaries --------------------
def total(buckets: Iterable[ScoreBucket]) -> int:
    return sum(b.count for b in buckets)

def share(buckets: Iterable[ScoreBucket], labels: Iterable[str]) -> float:
    """Percent (0-100) of respondents whose answer is one of `labels`."""
    buckets = list(buckets)
    wanted = set(labels)
    n = total(buckets)
    if not n:
        return 0.0
    return sum(b.count for b in buckets if b.label in wanted) / n * 100

def top_box(buckets: Iterable[ScoreBucket]) -> float:
    return share(buckets, TOP_BOX)

def middle(buckets: Iterable[ScoreBucket]) -> float:
    return share(buckets, MIDDLE)

def bottom_box(buckets: Iterable[ScoreBucket]) -> float:
    return share(buckets, BOTTOM_BOX)

def to_frame(buckets: Iterable[ScoreBucket]) -> pd.DataFrame:
    rows = [{"점수": b.label, "설명": b.description, "인원": b.count} for b in buckets]
    return pd.DataFrame(rows, columns=["점수", "설명", "인원"])
