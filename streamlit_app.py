# streamlit_app.py
# Run from repo root:  streamlit run streamlit_app.py
import logging

from survey_report.view import main

logging.basicConfig(level=logging.INFO)

main()
