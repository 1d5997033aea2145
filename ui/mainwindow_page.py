import streamlit as st

def render():
    st.markdown(
        """
        <style>
          .hero-title{
            font-size: 48px;
            font-weight: 700;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
            letter-spacing: .5px;
          }
          @media (max-width: 768px){
            .hero-title{ font-size: 34px; }
          }
          @media (prefers-color-scheme: dark){
            .hero-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="hero-title">PassForge 🔑</div>', unsafe_allow_html=True)

    st.markdown(
        "Generate random passwords, check how strong a password is, "
        "and export batches to CSV."
    )

    st.markdown(
        "- **Generator**: one password at a time, with a short history of the last 10.\n"
        "- **Strength check**: score, entropy and a rough crack-time estimate.\n"
        "- **Batch**: many passwords at once, downloadable as `passwords.csv`."
    )

    st.info(
        "Passwords are drawn with the operating system's secure random source and stay in this "
        "browser session only. Nothing is saved to disk or sent anywhere; reloading the page clears "
        "the history."
    )

    st.caption(
        "Strength scores and crack times are simple heuristics for quick feedback, "
        "not a cryptographic guarantee."
    )


# Alias
main = render

if __name__ == "__main__":
    render()
