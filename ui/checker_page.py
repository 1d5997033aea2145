# ui/checker_page.py
from __future__ import annotations

import streamlit as st

from core.strength_utils import analyze_password
from ui.widgets import get_session


def render() -> None:
    st.subheader("🛡️ Strength Checker")
    st.caption("Nothing typed here is stored or sent anywhere.")

    password = st.text_input("Password to check", type="password", key="chk_password")

    cols = st.columns(4)
    if not password:
        for col, name in zip(cols, ["Strength", "Score", "Entropy (bits)", "Crack time"]):
            col.metric(name, "-")
        return

    report = analyze_password(password, get_session().config.attempts_per_second)
    cols[0].metric("Strength", report.strength.text)
    cols[1].metric("Score", report.strength.score)
    cols[2].metric("Entropy (bits)", f"{report.entropy:.2f}")
    cols[3].metric("Crack time", report.crack_time)
    st.progress(report.strength.score / 100)

    with st.expander("How is this calculated?"):
        st.markdown(
            "- **Score**: 10 points each for length ≥ 8 / 12 / 16 / 20, lowercase, uppercase, "
            "digit, symbol, at least 70% distinct characters, and no run of 3 identical characters.\n"
            "- **Entropy**: length × log2(number of distinct characters in the password).\n"
            "- **Crack time**: 2^entropy guesses at 1 billion guesses per second.\n\n"
            "This is a rough heuristic, not a security guarantee."
        )


# Alias
main = render

if __name__ == "__main__":
    render()
