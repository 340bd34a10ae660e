# survey_report/content.py
# Report prose. Survey commentary is generated from the datasets so the
# percentages always match the charts.
from typing import Callable, Dict, List, NamedTuple, Sequence

from survey_report.config import ACCENTS
from survey_report.data import (
    ETHICS_DATA, SUBMISSION_DATA, USAGE_DATA, ChartType, ScoreBucket, ScoreLabel, Tab,
    bottom_box, middle, top_box,
)

# ======================================================
# 1–2. 조사 개요
# ======================================================
INTRO_HEADING = "1. 조사 동기 및 목적"
INTRO_PARAGRAPHS = [
    "최근 생성형 인공지능(Generative AI)의 빠른 확산은 학습과 과제 수행 방식에 커다란 변화를 일으키고 있다. "
    "ChatGPT, Gemini, Claude와 같은 도구는 고등학생들에게도 익숙한 존재가 되었고, 이를 통해 학생들은 과제를 "
    "더 빠르게, 더 다양하게 수행할 수 있는 기회를 얻고 있다.",
    "하지만 이러한 기술 활용은 동시에 윤리적 문제를 수반한다. 예를 들어 생성형 AI의 답변을 그대로 제출하는 것이 "
    "과연 표절인지, AI가 작성한 내용을 내가 쓴 것처럼 제출해도 되는지 등은 아직 명확한 기준이 부족하다. "
    "학생들 사이에서도 이러한 문제에 대한 인식 차이가 존재하며, 그로 인해 공정성, 창작성, 책임성에 대한 갈등이 "
    "발생하고 있다.",
    "따라서 본 조사는 우리 반 학생들이 생성형 AI를 과제 수행에 어느 정도 활용하고 있으며, 그에 대해 어떤 윤리적 "
    "인식을 가지고 있는지를 구체적으로 파악하고자 기획되었다.",
]
KEY_QUESTIONS_TITLE = "조사 주요 질문"
KEY_QUESTIONS = [
    "생성형 AI를 실제 과제에 얼마나 활용하고 있는가?",
    "생성형 AI가 작성한 내용을 수정 없이 제출한 경험이 있는가?",
    "그러한 제출이 윤리적으로 문제가 없다고 느끼는가?",
]

PLAN_HEADING = "2. 조사 계획"
PLAN_CARDS = [
    ("조사 기간", ["2025년 5월 12일 ~ 5월 16일 (5일간)"]),
    ("대상", ["미림마이스터고등학교 1학년 4반 학생 18명 전원"]),
    ("방법", ["- 설문조사: Google Forms (Likert 5점 척도)", "- 심층 인터뷰: AI 활용 경험이 다양한 3인 선정"]),
]
PLAN_PARAGRAPHS = [
    "조사는 2025년 5월 12일부터 5월 16일까지 5일간 실시되었으며, 서울시 소재 미림마이스터고등학교 1학년 4반 "
    "학생 18명을 대상으로 하였다. 조사 방법은 양적·질적 접근을 혼합한 형태로 구성되었으며, 설문조사와 심층 "
    "인터뷰가 병행되었다.",
    "설문은 Google Forms를 통해 Likert 5점 척도 문항 3개로 구성되었으며, 문항의 구성은 다음과 같다. 첫째, "
    "생성형 AI를 과제 수행에 활용한 경험 여부(행동), 둘째, AI 산출물을 수정 없이 제출하거나 자신이 쓴 것처럼 "
    "제출한 경험(윤리 경계), 셋째, AI 결과물 제출이 문제되지 않는다는 인식(윤리 판단)을 다루었다.",
    "이와 함께, 생성형 AI 활용 양상과 인식의 스펙트럼을 심층적으로 탐색하기 위해 3인을 선정하여 개별 인터뷰를 "
    "실시하였다. 인터뷰 대상자는 ▲AI 활용해서 코딩을 잘하는 학생, ▲유료 AI를 사용하는 학생, ▲AI를 잘 쓰지 않는 "
    "학생으로 구성되었으며, 질문은 공통 문항 2개와 개인화 문항 1개로 이루어졌다.",
]

# ======================================================
# 3. 설문 조사 결과
# ======================================================
SURVEY_HEADING = "3. 설문 조사 결과"

def _pct(value: float, accent: str) -> str:
    return f"<span style='color:{ACCENTS[accent]};font-weight:600'>{value:.1f}%</span>"

def usage_commentary(buckets: Sequence[ScoreBucket]) -> str:
    return (
        f"전체의 {_pct(top_box(buckets), 'blue')}가 4점 이상(그런 편이다~매우 그렇다)으로 응답하였다. "
        "이는 생성형 AI가 단순 참고 도구를 넘어 실제 학습 수행 과정에 깊숙이 통합되고 있음을 의미한다. "
        "AI는 글쓰기, 코딩, 아이디어 발상 등 다양한 방식으로 학생들의 과제 수행을 실질적으로 보조하고 있으며, "
        "학습 과정 전반에 영향을 미치고 있다."
    )

def submission_commentary(buckets: Sequence[ScoreBucket]) -> str:
    five = next((b.count for b in buckets if b.label == ScoreLabel.FIVE.value), 0)
    return (
        f"{_pct(top_box(buckets), 'purple')}가 4점 이상으로 응답하였다. 이는 단순히 AI를 활용하는 것을 넘어서, "
        "AI가 생성한 결과물을 학습자의 창작물로 오인하거나 그대로 제출하는 경험이 광범위하게 존재함을 시사한다. "
        f"특히 5점(매우 그렇다) 응답자도 {five}명에 달하여, 일정 비율의 학생은 창작과 표절의 경계를 명확히 "
        "인식하지 못하거나 윤리적으로 용인하는 태도를 보이는 것으로 해석된다."
    )

def ethics_commentary(buckets: Sequence[ScoreBucket]) -> str:
    return (
        f"{_pct(top_box(buckets), 'teal')}가 4점 이상으로 응답하였으며, 반대로 {_pct(bottom_box(buckets), 'teal')}는 "
        "1-2점(그렇지 않은 편이다-전혀 그렇지 않다)으로 명확한 부정적 인식을 드러냈다. "
        f"특히 중간 응답(3점)이 {_pct(middle(buckets), 'teal')}에 달한 점은 많은 학생들이 AI 활용에 대한 윤리 판단을 "
        "유보하거나 혼란을 경험하고 있음을 보여준다. 이는 AI 활용이 보편화되고 있음에도 불구하고, 교육적 차원에서 "
        "이에 대한 윤리적 기준이나 실천적 지침이 충분히 제시되지 않았음을 반증한다."
    )


class ChartSection(NamedTuple):
    heading: str
    title: str
    caption: str
    chart_type: ChartType
    buckets: Sequence[ScoreBucket]
    commentary: Callable[[Sequence[ScoreBucket]], str]

SURVEY_SECTIONS: List[ChartSection] = [
    ChartSection("가. AI 활용 경험에 대한 응답 분석",
                 "문항 1. 생성형 AI 활용 범위",
                 "스스로 해결해야 할 과제를 생성형 AI의 도움을 받아 완성한 적이 있다.",
                 ChartType.USAGE, USAGE_DATA, usage_commentary),
    ChartSection("나. AI 결과물 제출 방식과 윤리 경계",
                 "문항 2. 생성형 AI 산출물 제출 방식",
                 "생성형 AI가 작성한 내용을 별다른 수정 없이 제출하거나, 내가 직접 쓴 것처럼 제출한 적이 있다.",
                 ChartType.SUBMISSION, SUBMISSION_DATA, submission_commentary),
    ChartSection("다. AI 활용에 대한 윤리적 인식",
                 "문항 3. 생성형 AI 활용에 대한 윤리적 인식",
                 "생성형 AI가 작성한 내용을 제출하더라도, 문제될 것이 없다고 느낀 적이 있다.",
                 ChartType.ETHICS, ETHICS_DATA, ethics_commentary),
]

# ======================================================
# 4. 인터뷰 기반 질적 분석
# ======================================================
INTERVIEW_HEADING = "4. 인터뷰 기반 질적 분석"
ILLUSTRATION_ALT = "학생 인터뷰 장면 일러스트"

class InterviewTheme(NamedTuple):
    heading: str
    tone: str            # quote-card css suffix
    quotes: List[str]
    analysis: str

INTERVIEW_THEMES: List[InterviewTheme] = [
    InterviewTheme(
        "1) 활용 기준 인식", "purple",
        ["AI 결과물이 너무 티 나면 점수 깎일까 봐 수정함", "AI가 똑똑할수록 오히려 더 위험하다", "직접 해야 과제의 의미가 있다"],
        "심층 인터뷰를 통해 학생들은 생성형 AI의 활용 과정에서 다양한 심리적 반응과 자기 정당화 논리를 표현하였다. "
        "한 학생은 \"시간이 없을 때 그냥 제출했지만 찝찝했다\"라고 응답하며 내면적 갈등을 표출하였고, 또 다른 학생은 "
        "\"그 시간에 다른 공부를 하는 것이 더 낫다고 생각했다\"며 효율성에 기반한 판단을 강조하였다.",
    ),
    InterviewTheme(
        "2) 감정적 반응", "blue",
        ["계속 쓰다 보면 내가 바보가 되는 느낌", "뇌가 쪼그라드는 느낌, 무력감이 든다", "덕분에 앱 개발 프로젝트를 처음으로 혼자 완성했다!"],
        "이와 동시에, AI 활용에 대한 부정적 정서도 확인되었다. \"계속 AI에 의존하니 내가 바보가 되는 느낌이 들었다\", "
        "\"뇌가 쪼그라드는 것 같았다\", \"무력감을 느꼈다\"는 응답은 도구에 대한 의존이 학습자의 자기 정체성과 능동성에 "
        "미치는 심리적 영향을 보여준다. 반면, 유료 사용자였던 학생은 \"이전에는 혼자 하기 어려웠던 앱 개발 프로젝트를 "
        "AI 덕분에 완성할 수 있었다\"고 응답하며, AI가 학습의 확장성과 창의적 도전을 가능케 하는 긍정적 자극이 될 수 "
        "있음을 언급하였다.",
    ),
    InterviewTheme(
        "3) 윤리 판단 기준", "teal",
        ["다들 쓰니까 괜찮지 않나 싶다", "출처도 안 밝히고 제출하면 당연히 표절이다", "그 기준을 학교에서 정확히 알려준 적은 없다"],
        "이러한 응답은 AI 활용이 단순히 '윤리적이냐, 아니냐'의 이분법적 문제가 아니라, 학습자의 심리, 정체성, "
        "자율성과 깊이 연결된 복합적 현상임을 시사한다.",
    ),
]

# ======================================================
# 5. 결론 및 제언
# ======================================================
CONCLUSION_HEADING = "5. 결론 및 제언"
SUMMARY_HEADING = "가. 결론 요약"
SUMMARY = (
    "조사 결과, 우리 반 학생들은 생성형 AI를 학습 수행에 활발히 활용하고 있으며, 일부는 수정 없는 제출이나 자기 "
    "창작물처럼 제출하는 경험도 보유하고 있었다. 그러나 이에 대한 윤리 인식은 뚜렷하게 양분되어 있었다. 일부 학생은 "
    "AI 결과물 제출을 문제로 인식하지 않았으며, 반면 다른 학생은 명확한 윤리적 거부감을 드러냈다. 또한 인터뷰를 통해 "
    "확인된 바와 같이, AI에 대한 무비판적 사용은 무력감과 자기 상실의 정서를 유발하기도 하였다."
)
RECOMMENDATIONS_HEADING = "나. 교육적 제언"

class Recommendation(NamedTuple):
    heading: str
    bullets: List[str]
    body: str

RECOMMENDATIONS: List[Recommendation] = [
    Recommendation(
        "1) AI 활용 기준의 명확화",
        ["과제 수행 시 AI 사용 여부를 명시하도록 유도", "학교 차원의 출처 표기, 재작성 기준 가이드 제공"],
        "생성형 AI 활용에 대한 윤리적 기준을 명문화해야 한다. 학교는 학생들이 AI를 활용한 학습에서 '어디까지가 "
        "허용되는가'에 대한 명확한 기준과 실천 원칙을 제시해야 하며, 출처 표기 및 재작성 가이드라인을 도입할 필요가 있다.",
    ),
    Recommendation(
        "2) 창작과 표절의 차이에 대한 교육 강화",
        ["단순 사용 금지가 아닌, 책임 있는 활용 방법 제시", "AI가 제공한 내용에 대한 재구성·출처 표시 연습 포함"],
        "창작과 표절의 경계를 명확히 하는 윤리 교육이 병행되어야 한다. 단순 금지보다는 책임 있는 활용 방식을 교육하는 "
        "것이 효과적이며, AI가 작성한 내용에 대해 어떻게 수정하고 출처를 명시해야 하는지에 대한 실제적인 훈련이 필요하다.",
    ),
    Recommendation(
        "3) 디지털 시민성과 자율성 교육 통합",
        ["AI에 대한 비판적 수용 역량과 윤리적 판단력을 함께 기르기",
         "\"AI 덕분에 가능성을 넓혔다\"는 경험과 \"내가 사라지는 느낌\"이라는 감정을 동시에 수용하는 복합적 교육 설계 필요"],
        "디지털 시민성 교육과 자율적 학습 태도 강화가 요구된다. 생성형 AI는 학습의 주체가 아니라 보조 도구임을 명확히 "
        "인식시켜야 하며, 학생이 결과물에 대한 비판적 검토 능력과 자기 기여도에 대한 판단력을 갖출 수 있도록 교육과정이 "
        "설계되어야 한다.",
    ),
]

SECTION_HEADINGS: Dict[Tab, str] = {
    Tab.INTRO: INTRO_HEADING,
    Tab.SURVEY: SURVEY_HEADING,
    Tab.INTERVIEW: INTERVIEW_HEADING,
    Tab.CONCLUSION: CONCLUSION_HEADING,
}
