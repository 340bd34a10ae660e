"""Survey report on generative-AI use and ethics awareness (Streamlit + Plotly)."""
