import streamlit as st

PRIMARY_GREEN = "#16a34a"  # green-600
DARK_GREEN = "#15803d"  # green-700
BLUE = "#2563EB"  # blue-600
CYAN = "#0891b2"  # cyan-600
AMBER = "#d97706"  # amber-600
RED = "#DC2626"  # red-600
CHIP_BG = "#dcfce7"  # green-100


def inject_base_css():
    """Page-wide styles; the router calls this once per script run."""
    st.markdown(
        f"""
        <style>
        .stApp {{background:linear-gradient(135deg,#f0fdf4,#eff6ff);}}
        .stButton>button {{border-radius:12px; font-weight:600;}}
        .badge {{
            display:inline-block; padding:2px 10px; border-radius:999px;
            font-size:12px; line-height:18px; font-weight:600;
            background:{CHIP_BG}; color:{DARK_GREEN}; margin-right:4px; margin-bottom:4px;
        }}
        .field-error {{color:{RED}; font-size:0.85rem; margin:-0.4rem 0 0.6rem;}}
        .hero {{padding:1.4rem 1.6rem; border-radius:16px;
            background:linear-gradient(90deg,{PRIMARY_GREEN},{DARK_GREEN}); color:white; margin-bottom:1rem;}}
        .hero h1, .hero h2 {{color:white; margin:0 0 .3rem;}}
        .tile {{border:2px solid; border-radius:12px; padding:1rem; text-align:center; height:100%;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def hero(title: str, subtitle: str = "", icon: str = "🌱"):
    st.markdown(
        f"""<div class='hero'><h2>{icon} {title}</h2>
        <div style='opacity:.9;'>{subtitle}</div></div>""",
        unsafe_allow_html=True,
    )


def field_error(errors: dict, field: str):
    """Inline message under a form field, if that field failed validation."""
    msg = (errors or {}).get(field)
    if msg:
        st.markdown(f"<div class='field-error'>{msg}</div>", unsafe_allow_html=True)


def badge(text: str) -> str:
    return f'<span class="badge">{text}</span>'
