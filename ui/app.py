"""Portfolio page — Streamlit single-page app.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` and `notes.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402
from prometheus_client import start_http_server  # noqa: E402

from notes.config import settings  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Franklin Ramos",
    page_icon="⚛️",
    layout="centered",
)

from ui.components import notes, profile  # noqa: E402


@st.cache_resource
def _start_metrics_exporter(port: int) -> bool:
    """Start the Prometheus exporter once per process."""
    start_http_server(port)
    logger.info("Prometheus metrics exposed on port %d", port)
    return True


if settings.metrics_port:
    _start_metrics_exporter(settings.metrics_port)

profile.render_header()
profile.render_about()
profile.render_projects()
profile.render_publications()
notes.render()
profile.render_footer()
