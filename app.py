# app.py
from pathlib import Path
import sys
import importlib
import logging
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import load_config  # noqa: E402
from ui.widgets import flush_notices, options_panel  # noqa: E402

# ==== Streamlit ====
st.set_page_config(
    page_title="PassForge",
    page_icon="🔑",
    layout="wide",
)

# ==== Logging ====
logging.basicConfig(
    level=getattr(logging, load_config().log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ==== Import pages after config ====
required_modules = {
    "generator_page":  "🎲 Generator",
    "checker_page":    "🛡️ Strength check",
    "batch_page":      "📦 Batch",
    "mainwindow_page": "ℹ️ About",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logging.getLogger(__name__).exception("Failed to import ui.%s", mod_name)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Show errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar navigation + shared options ====
choice = st.sidebar.radio("Tools", list(PAGES.keys()), key="nav")
st.sidebar.divider()
options_panel()

PAGES[choice]()
flush_notices()
