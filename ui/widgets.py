# ui/widgets.py
from __future__ import annotations
import json
from typing import List, Sequence

import streamlit as st
import streamlit.components.v1 as components

from core.config import load_config
from core.password_utils import GenerationOptions
from core.session_utils import PasswordSession

_SESSION_KEY = "pw_session"
_NOTICES_KEY = "pw_notices"

_TOAST_ICONS = {
    "info": "ℹ️",
    "success": "✅",
    "error": "⚠️",
}


# ---------------- Session ----------------
def get_session() -> PasswordSession:
    """One PasswordSession per browser session (dies with the tab)."""
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = PasswordSession(load_config())
    return st.session_state[_SESSION_KEY]


# ---------------- Options ----------------
def options_panel() -> None:
    """Length + character options, kept in the sidebar so every page shares them."""
    cfg = get_session().config
    with st.sidebar:
        st.markdown("**Password options**")
        st.slider("Length", cfg.min_length, cfg.max_length, cfg.default_length, 1, key="opt_length")
        c1, c2 = st.columns(2)
        with c1:
            st.checkbox("A–Z", value=True, key="opt_upper")
            st.checkbox("0–9", value=True, key="opt_digits")
        with c2:
            st.checkbox("a–z", value=True, key="opt_lower")
            st.checkbox("Symbols", value=True, key="opt_symbols")
        st.checkbox("Exclude look-alike (0 O 1 I l)", value=False, key="opt_ambiguous")
        st.text_input("Exclude characters", value="", key="opt_exclude",
                      placeholder="e.g. {}[]\\.")


def read_options() -> GenerationOptions:
    """Snapshot of the option widgets, read fresh for every generation."""
    ss = st.session_state
    return GenerationOptions(
        include_uppercase=bool(ss.get("opt_upper", True)),
        include_lowercase=bool(ss.get("opt_lower", True)),
        include_digits=bool(ss.get("opt_digits", True)),
        include_symbols=bool(ss.get("opt_symbols", True)),
        exclude_ambiguous=bool(ss.get("opt_ambiguous", False)),
        exclude_chars=ss.get("opt_exclude", "") or "",
    )


def read_length() -> int:
    return int(st.session_state.get("opt_length", get_session().config.default_length))


# ---------------- Notifications ----------------
def notify(message: str, level: str = "info") -> None:
    """Queue a toast; safe to call from widget callbacks."""
    if level not in _TOAST_ICONS:
        raise ValueError(f"Unknown notification level: {level}")
    st.session_state.setdefault(_NOTICES_KEY, []).append((message, level))


def flush_notices() -> None:
    notices = st.session_state.pop(_NOTICES_KEY, [])
    for message, level in notices:
        st.toast(message, icon=_TOAST_ICONS[level])


# ---------------- Clipboard ----------------
def _js_data(value) -> str:
    # keep "</script>" out of the inline script
    return json.dumps(value).replace("</", "<\\/")


def copy_button(text: str, label: str = "📋 Copy") -> None:
    """Browser-side copy with the textarea fallback for non-secure contexts."""
    components.html(
        f"""
<div style="font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;">
  <button id="cpy" style="background:#2563eb;border:none;color:#fff;padding:6px 12px;
          border-radius:6px;cursor:pointer;">{label}</button>
</div>
<script>
const text = {_js_data(text)};
{_COPY_JS}
document.getElementById("cpy").addEventListener("click", (e) => flash(e.target, text));
</script>
        """,
        height=44,
    )


def copy_table(passwords: Sequence[str], show_plain: bool = False) -> None:
    """Numbered password table with per-row Copy buttons and a show/hide toggle."""
    pw_data: List[dict] = [{"plain": p, "masked": ("•" * len(p))} for p in passwords]
    frame_height = min(720, 90 + 36 * len(pw_data))

    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  .pw-shown {{ color: #111827; }}
  @media (prefers-color-scheme: dark) {{
    .pw-shown {{ color: #e5e7eb; }}
    .pw-shown.pw-plain {{ color: #ef4444; }}
  }}
  table#pwtable {{ border-collapse: collapse; width: 100%; border: 1px solid #e5e7eb; }}
  thead tr {{ background: #f8fafc; }}
  td, th {{ padding: 6px 10px; }}
  @media (prefers-color-scheme: dark) {{
    table#pwtable {{ border-color: #374151; }}
    thead tr {{ background: #111827; color: #e5e7eb; }}
  }}
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer;
  }}
  #toggle {{
    padding:6px 10px; border:1px solid #d1d5db; border-radius:8px; cursor:pointer; background:#fff;
  }}
  @media (prefers-color-scheme: dark) {{
    #toggle {{ background:#0b0f19; border-color:#374151; color:#e5e7eb; }}
  }}
</style>

<div style="font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;">
  <div style="display:flex;gap:8px;align-items:center;margin:6px 0 10px;">
    <button id="toggle"></button>
  </div>
  <table id="pwtable">
    <thead>
      <tr>
        <th style="text-align:left;width:60px;">#</th>
        <th style="text-align:left;">Password</th>
        <th style="text-align:right;width:110px;"></th>
      </tr>
    </thead>
    <tbody id="pwbody"></tbody>
  </table>
</div>

<script>
const data = {_js_data(pw_data)};
let showPlain = {str(bool(show_plain)).lower()};
const tbody = document.getElementById("pwbody");
const toggleBtn = document.getElementById("toggle");
{_COPY_JS}

function makeRow(idx, item) {{
  const tr = document.createElement("tr");

  const tdIdx = document.createElement("td");
  tdIdx.textContent = String(idx + 1);

  const tdPwd = document.createElement("td");
  tdPwd.style.fontFamily = "ui-monospace,Consolas,Monaco,monospace";
  const span = document.createElement("span");
  span.className = "pw-shown" + (showPlain ? " pw-plain" : "");
  span.textContent = showPlain ? item.plain : item.masked;
  tdPwd.appendChild(span);

  const tdBtn = document.createElement("td");
  tdBtn.style.textAlign = "right";
  const btn = document.createElement("button");
  btn.className = "cpy";
  btn.textContent = "Copy";
  btn.dataset.idx = String(idx);
  tdBtn.appendChild(btn);

  tr.appendChild(tdIdx);
  tr.appendChild(tdPwd);
  tr.appendChild(tdBtn);
  return tr;
}}

function renderRows() {{
  tbody.innerHTML = "";
  data.forEach((it, i) => tbody.appendChild(makeRow(i, it)));
  toggleBtn.textContent = showPlain ? "🙈 Hide" : "👁 Show";
}}
renderRows();

document.getElementById("pwtable").addEventListener("click", (e) => {{
  const btn = e.target.closest("button.cpy");
  if (!btn) return;
  flash(btn, data[Number(btn.dataset.idx)].plain);
}});

toggleBtn.addEventListener("click", () => {{
  showPlain = !showPlain;
  renderRows();
}});
</script>
        """,
        height=frame_height,
    )


_COPY_JS = """
function copyText(text) {
  if (navigator.clipboard && window.isSecureContext) {
    return navigator.clipboard.writeText(text);
  }
  return new Promise((resolve, reject) => {
    const ta = document.createElement('textarea');
    ta.value = text;
    ta.style.position = 'fixed';
    ta.style.opacity = '0';
    document.body.appendChild(ta);
    ta.focus();
    ta.select();
    try { document.execCommand('copy') ? resolve() : reject(); }
    catch (err) { reject(err); }
    finally { document.body.removeChild(ta); }
  });
}
function flash(btn, text) {
  const old = btn.textContent;
  copyText(text).then(() => {
    btn.textContent = "Copied";
  }).catch(() => {
    btn.textContent = "Copy failed";
  }).finally(() => {
    setTimeout(() => btn.textContent = old, 1200);
  });
}
"""
