# ui/generator_page.py
from __future__ import annotations

import streamlit as st

from ui.widgets import copy_button, get_session, notify, read_length, read_options

_STRENGTH_COLORS = {
    "very-weak": "red",
    "weak": "orange",
    "medium": "orange",
    "strong": "green",
    "very-strong": "green",
}


# ---------------- Callbacks ----------------
def _on_generate() -> None:
    result = get_session().generate(read_length(), read_options())
    if result.ok:
        notify("Password generated", "success")
    else:
        notify(str(result.error), "error")


def _on_remove(index: int) -> None:
    get_session().remove_from_history(index)
    notify("Removed from history", "info")


def _on_clear() -> None:
    get_session().clear_history()
    notify("History cleared", "info")


# ---------------- Sections ----------------
def _strength_meter() -> None:
    strength = get_session().strength
    if strength is None:
        return
    st.progress(strength.score / 100)
    color = _STRENGTH_COLORS[strength.label]
    st.markdown(f"Strength: :{color}[**{strength.text}**] — score **{strength.score}**/100")


def _history_list() -> None:
    session = get_session()
    st.markdown(f"**Recent passwords** ({len(session.history)}/{session.history.capacity})")
    if not len(session.history):
        st.caption("No history yet.")
        return
    st.button("🧹 Clear history", on_click=_on_clear, key="hist_clear")
    for i, pw in enumerate(session.history.items()):
        col_pw, col_btn = st.columns([6, 1])
        with col_pw:
            st.code(pw, language=None)
        with col_btn:
            # key by value so a removal does not shift the other buttons
            st.button("🗑️", key=f"hist_rm_{pw}", help="Remove", on_click=_on_remove, args=(i,))


# ---------------- Page ----------------
def render() -> None:
    st.subheader("🎲 Password Generator")
    session = get_session()

    # First visit: start with a password, like the original page did on load
    if session.current is None and not st.session_state.get("gen_initialized"):
        st.session_state["gen_initialized"] = True
        result = session.generate(read_length(), read_options())
        if not result.ok:
            st.error(str(result.error))

    options = read_options()
    if not options.is_valid():
        st.warning("Select at least one character type in the sidebar.")

    if session.current:
        st.code(session.current, language=None)
        copy_button(session.current)
        _strength_meter()

    col1, col2 = st.columns(2)
    with col1:
        st.button("🎲 Generate", type="primary", on_click=_on_generate, key="gen_btn")
    with col2:
        st.button("🔄 Regenerate", on_click=_on_generate, key="regen_btn")

    st.divider()
    _history_list()


# Alias
main = render

if __name__ == "__main__":
    render()
