# ui/batch_page.py
from __future__ import annotations

import pandas as pd
import streamlit as st

from core.export_utils import CSV_FILENAME, CSV_MIME
from core.strength_utils import score_password
from ui.widgets import copy_table, get_session, notify, read_length, read_options


def _on_batch() -> None:
    count = int(st.session_state.get("batch_count", get_session().config.default_batch))
    result = get_session().run_batch(count, read_length(), read_options())
    if result.ok:
        notify(f"Generated {len(result)} passwords", "success")
    else:
        notify(str(result.error), "error")


def _on_download() -> None:
    notify("CSV file downloaded", "success")


def _summary(passwords) -> pd.DataFrame:
    rows = []
    for i, pw in enumerate(passwords, 1):
        s = score_password(pw)
        rows.append({"#": i, "Length": len(pw), "Score": s.score, "Strength": s.text})
    return pd.DataFrame(rows).set_index("#")


def render() -> None:
    st.subheader("📦 Batch Generator")
    session = get_session()
    cfg = session.config

    colL, colR = st.columns([3, 2])
    with colL:
        st.number_input("Quantity", min_value=cfg.batch_min, max_value=cfg.batch_max,
                        value=cfg.default_batch, step=1, key="batch_count")
        show_plain = st.checkbox("Show characters (unmasked)", value=False, key="batch_plain")
    with colR:
        st.caption(f"Length {read_length()} — options from the sidebar.")
        st.button("🎲 Generate batch", type="primary", on_click=_on_batch, key="batch_btn")

    passwords = session.batch.passwords
    if not passwords:
        st.info("Click **Generate batch** to start.")
    else:
        copy_table(passwords, show_plain=show_plain)
        with st.expander("Strength summary"):
            st.dataframe(_summary(passwords))

    csv_text = session.export_batch()
    st.download_button(
        "⬇️ Export CSV",
        data=csv_text or "",
        file_name=CSV_FILENAME,
        mime=CSV_MIME,
        disabled=csv_text is None,
        on_click=_on_download,
        key="batch_export",
    )
    if csv_text is not None and any("," in pw for pw in passwords):
        st.caption("Note: some passwords contain commas; the CSV is written without quoting.")


# Alias
main = render

if __name__ == "__main__":
    render()
