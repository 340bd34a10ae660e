# survey_report/config.py
from pathlib import Path

# -------------------- Page --------------------
PAGE_TITLE = "생성형 AI 활용·윤리 인식 실태 조사"
REPORT_TITLE = "생성형 인공지능 활용과 윤리 인식에 대한 고등학생 실태 조사 보고서"
REPORT_SUBTITLE = "미림마이스터고등학교 1학년 4반 | 2025년 5월"
FOOTER_TEXT = "© 2025 미림마이스터고등학교 1학년 4반 | 생성형 AI 윤리 조사 프로젝트"

# -------------------- Paths --------------------
PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
ILLUSTRATION_PATH = ASSETS_DIR / "students-interview-illustration.jpg"

# -------------------- Palette --------------------
COLORS = {
    "blue": "#4361ee",
    "purple": "#7b2cbf",
    "teal": "#2a9d8f",
    "background": "#f8f9fa",
    "text": "#212529",
}
# tooltip accents (tailwind *-600)
ACCENTS = {
    "blue": "#2563eb",
    "purple": "#9333ea",
    "teal": "#0d9488",
}
TICK_COLOR = "#666"
LABEL_COLOR = "#555"
GRID_COLOR = "#e0e0e0"
AXIS_LINE_COLOR = "#E0E0E0"

# -------------------- Chart geometry --------------------
BAR_WIDTH = 0.5          # fraction of one category slot
BAR_CORNER_RADIUS = 6
LABEL_OFFSET_PX = 6
CHART_HEIGHT = 420
CHART_MARGIN = dict(t=30, r=10, l=0, b=60)

# -------------------- Global styling --------------------
GLOBAL_CSS = """
<style>
  [data-testid="stHeading"] h1 { text-align: center; }
  .report-subtitle { text-align: center; color: #4b5563; margin-bottom: 1.5rem; }
  .chart-caption { text-align: center; color: #4b5563; font-style: italic; }
  .quote-card { padding: 1rem; border-radius: 0.5rem; font-style: italic; color: #374151; }
  .quote-purple { background: #faf5ff; border: 1px solid #e9d5ff; }
  .quote-blue { background: #eff6ff; border: 1px solid #bfdbfe; }
  .quote-teal { background: #f0fdfa; border: 1px solid #99f6e4; }
  .report-footer { text-align: center; color: #6b7280; font-size: 0.875rem;
                   border-top: 1px solid #d1d5db; margin-top: 3rem; padding-top: 2rem; }
</style>
"""
