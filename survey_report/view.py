# survey_report/view.py
# Streamlit page: header, tab bar, one body section per run, footer.
import logging
from io import BytesIO
from typing import Callable

import pandas as pd
import streamlit as st

from survey_report import config
from survey_report.charts import bar_chart
from survey_report.content import (
    CONCLUSION_HEADING, ILLUSTRATION_ALT, INTERVIEW_HEADING, INTERVIEW_THEMES, INTRO_HEADING,
    INTRO_PARAGRAPHS, KEY_QUESTIONS, KEY_QUESTIONS_TITLE, PLAN_CARDS, PLAN_HEADING, PLAN_PARAGRAPHS,
    RECOMMENDATIONS, RECOMMENDATIONS_HEADING, SUMMARY, SUMMARY_HEADING, SURVEY_HEADING,
    SURVEY_SECTIONS, ChartSection,
)
from survey_report.data import DATASETS, DEFAULT_TAB, TAB_TITLES, ChartType, Tab, dataset, to_frame

logger = logging.getLogger(__name__)

STATE_KEY = "active_tab"

# -------------------- Page setup --------------------
def setup_page() -> None:
    st.set_page_config(page_title=config.PAGE_TITLE, layout="wide")
    st.markdown(config.GLOBAL_CSS, unsafe_allow_html=True)

# -------------------- Active tab --------------------
def get_active_tab() -> Tab:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DEFAULT_TAB.value
    return Tab(st.session_state[STATE_KEY])

def select_tab(tab: Tab) -> None:
    previous = st.session_state.get(STATE_KEY)
    st.session_state[STATE_KEY] = tab.value
    logger.info("Active tab: %s -> %s", previous, tab.value)

# -------------------- Cached exports --------------------
@st.cache_data
def dataset_csv(name: str) -> bytes:
    # utf-8-sig so Excel opens the Hangul headers correctly
    return to_frame(dataset(name)).to_csv(index=False).encode("utf-8-sig")

@st.cache_data
def dataset_xlsx() -> bytes:
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for chart_type, buckets in DATASETS.items():
            to_frame(buckets).to_excel(writer, sheet_name=chart_type.value, index=False)
    return buf.getvalue()

# -------------------- Header / tab bar / footer --------------------
def render_header() -> None:
    st.title(config.REPORT_TITLE)
    st.markdown(f"<p class='report-subtitle'>{config.REPORT_SUBTITLE}</p>", unsafe_allow_html=True)

def render_tab_bar(active: Tab, on_select: Callable[[Tab], None]) -> None:
    cols = st.columns(len(Tab))
    for col, tab in zip(cols, Tab):
        with col:
            st.button(TAB_TITLES[tab], key=f"tab_{tab.value}",
                      type="primary" if tab is active else "secondary",
                      on_click=on_select, args=(tab,))

def render_footer() -> None:
    st.markdown(f"<div class='report-footer'>{config.FOOTER_TEXT}</div>", unsafe_allow_html=True)

# ======================================================
# Intro
# ======================================================
def render_intro() -> None:
    st.header(INTRO_HEADING)
    for p in INTRO_PARAGRAPHS:
        st.markdown(p)
    with st.container(border=True):
        st.markdown(f"**{KEY_QUESTIONS_TITLE}**")
        st.markdown("\n".join(f"- {q}" for q in KEY_QUESTIONS))

    st.subheader(PLAN_HEADING)
    for col, (title, lines) in zip(st.columns(len(PLAN_CARDS)), PLAN_CARDS):
        with col, st.container(border=True):
            st.markdown(f"**{title}**")
            st.markdown("\n".join(lines))
    for p in PLAN_PARAGRAPHS:
        st.markdown(p)

# ======================================================
# Survey
# ======================================================
def render_chart_section(section: ChartSection, wide: bool) -> None:
    st.subheader(section.heading)
    with st.container(border=True):
        st.markdown(f"<h4 style='text-align:center'>{section.title}</h4>", unsafe_allow_html=True)
        st.markdown(f"<p class='chart-caption'>\"{section.caption}\"</p>", unsafe_allow_html=True)
        fig = bar_chart(section.buckets, section.chart_type, wide=wide)
        st.plotly_chart(fig, key=f"chart_{section.chart_type.value}")
    with st.container(border=True):
        st.markdown(section.commentary(section.buckets), unsafe_allow_html=True)

def render_downloads() -> None:
    st.caption("응답 데이터 내려받기")
    cols = st.columns(len(ChartType) + 1)
    for col, (i, chart_type) in zip(cols, enumerate(ChartType, start=1)):
        with col:
            st.download_button(f"문항 {i} (CSV)", dataset_csv(chart_type.value),
                               file_name=f"survey_{chart_type.value}.csv", mime="text/csv",
                               key=f"dl_{chart_type.value}")
    with cols[-1]:
        st.download_button("전체 (XLSX)", dataset_xlsx(), file_name="survey_results.xlsx",
                           mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                           key="dl_all")

def render_survey(wide: bool = True) -> None:
    st.header(SURVEY_HEADING)
    for section in SURVEY_SECTIONS:
        render_chart_section(section, wide)
    render_downloads()

# ======================================================
# Interview
# ======================================================
def render_illustration() -> None:
    path = config.ILLUSTRATION_PATH
    if path.exists():
        st.image(str(path), caption=ILLUSTRATION_ALT)
    else:
        logger.warning("Illustration not found at %s", path)
        st.caption(f"[{ILLUSTRATION_ALT}]")

def render_interview() -> None:
    st.header(INTERVIEW_HEADING)
    render_illustration()
    for theme in INTERVIEW_THEMES:
        st.subheader(theme.heading)
        for col, quote in zip(st.columns(len(theme.quotes)), theme.quotes):
            with col:
                st.markdown(f"<div class='quote-card quote-{theme.tone}'>\"{quote}\"</div>",
                            unsafe_allow_html=True)
        st.markdown(theme.analysis)

# ======================================================
# Conclusion
# ======================================================
def render_conclusion() -> None:
    st.header(CONCLUSION_HEADING)
    st.subheader(SUMMARY_HEADING)
    with st.container(border=True):
        st.markdown(SUMMARY)

    st.subheader(RECOMMENDATIONS_HEADING)
    for rec in RECOMMENDATIONS:
        st.markdown(f"**{rec.heading}**")
        with st.container(border=True):
            st.markdown("\n".join(f"- {b}" for b in rec.bullets))
            st.markdown(rec.body)

# -------------------- Page --------------------
def render_body(active: Tab, wide: bool) -> None:
    if active is Tab.INTRO:
        render_intro()
    elif active is Tab.SURVEY:
        render_survey(wide)
    elif active is Tab.INTERVIEW:
        render_interview()
    elif active is Tab.CONCLUSION:
        render_conclusion()

def main() -> None:
    setup_page()
    # Browser width is not visible from Python; the reader picks the tick style
    wide = st.sidebar.checkbox("축 설명 표시", value=True, key="wide_ticks",
                               help="막대 그래프 가로축에 점수별 설명을 함께 표시합니다.")
    active = get_active_tab()
    render_header()
    render_tab_bar(active, select_tab)
    render_body(active, wide)
    render_footer()
