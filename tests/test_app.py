import logging
from io import BytesIO
from pathlib import Path

import pandas as pd
import pytest
from PIL import Image
from streamlit.testing.v1 import AppTest

from survey_report import config
from survey_report.content import ILLUSTRATION_ALT, SECTION_HEADINGS
from survey_report.data import Tab
from survey_report.view import dataset_csv, dataset_xlsx

APP = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


@pytest.fixture
def at():
    app = AppTest.from_file(APP, default_timeout=30)
    app.run()
    assert not app.exception
    return app


def shown_sections(app):
    headings = {h: t for t, h in SECTION_HEADINGS.items()}
    return [headings[h.value] for h in app.header if h.value in headings]


def highlighted(app):
    return [t for t in Tab if app.button(key=f"tab_{t.value}").proto.type == "primary"]


def test_initial_render(at):
    assert at.title[0].value == config.REPORT_TITLE
    assert at.session_state["active_tab"] == "intro"
    assert shown_sections(at) == [Tab.INTRO]
    assert highlighted(at) == [Tab.INTRO]


def test_tab_bar_order_and_titles(at):
    labels = [at.button(key=f"tab_{t.value}").label for t in Tab]
    assert labels == ["조사 개요", "설문 결과", "심층 인터뷰", "결론 및 제언"]


def test_clicking_each_tab_shows_one_section(at):
    for tab in [Tab.SURVEY, Tab.INTERVIEW, Tab.CONCLUSION, Tab.INTRO]:
        at.button(key=f"tab_{tab.value}").click().run()
        assert not at.exception
        assert shown_sections(at) == [tab]
        assert highlighted(at) == [tab]


def test_reclicking_active_tab_is_idempotent(at):
    at.button(key="tab_survey").click().run()
    before = [s.value for s in at.subheader]
    at.button(key="tab_survey").click().run()
    assert shown_sections(at) == [Tab.SURVEY]
    assert [s.value for s in at.subheader] == before


def test_survey_tab_commentary_uses_computed_shares(at):
    at.button(key="tab_survey").click().run()
    text = " ".join(m.value for m in at.markdown)
    assert "88.9%" in text
    assert "66.7%" in text
    assert "22.2%" in text
    assert "문항 1. 생성형 AI 활용 범위" in text


def test_missing_illustration_falls_back_to_caption(at, monkeypatch, tmp_path, caplog):
    missing = tmp_path / "missing.jpg"
    monkeypatch.setattr(config, "ILLUSTRATION_PATH", missing)
    caplog.set_level(logging.WARNING, logger="survey_report.view")
    at.button(key="tab_interview").click().run()
    assert not at.exception
    assert not at.get("imgs")
    assert [c.value for c in at.caption] == [f"[{ILLUSTRATION_ALT}]"]
    warnings = [r for r in caplog.records if r.name == "survey_report.view" and r.levelno == logging.WARNING]
    assert warnings and str(missing) in warnings[0].getMessage()


def test_illustration_shown_when_present(at, monkeypatch, tmp_path):
    image_path = tmp_path / "illustration.png"
    Image.new("RGB", (8, 8), color=(67, 97, 238)).save(image_path)
    monkeypatch.setattr(config, "ILLUSTRATION_PATH", image_path)
    at.button(key="tab_interview").click().run()
    assert not at.exception
    assert len(at.get("imgs")) == 1
    assert all(ILLUSTRATION_ALT not in c.value for c in at.caption)


def test_title_centred_by_global_css():
    assert '[data-testid="stHeading"] h1 { text-align: center; }' in config.GLOBAL_CSS


def test_footer_on_every_tab(at):
    for tab in Tab:
        at.button(key=f"tab_{tab.value}").click().run()
        assert any(config.FOOTER_TEXT in m.value for m in at.markdown)


def test_dataset_csv():
    text = dataset_csv("usage").decode("utf-8-sig")
    assert text.splitlines()[0] == "점수,설명,인원"
    assert "5점,매우 그렇다,10" in text


def test_dataset_xlsx_has_sheet_per_question():
    sheets = pd.read_excel(BytesIO(dataset_xlsx()), sheet_name=None)
    assert list(sheets) == ["usage", "submission", "ethics"]
    assert sheets["ethics"]["인원"].tolist() == [1, 3, 7, 4, 3]
