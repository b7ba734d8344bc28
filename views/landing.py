import streamlit as st
from services import session
from ui.components import hero

FEATURES = [
    ("🌱", "Crop Recommendations", "Crops matched to your soil, climate and farm size."),
    ("📅", "Growing Plans", "Stage-by-stage plans from planting to harvest."),
    ("💧", "Irrigation & Fertilizer", "Simple schedules you can follow in the field."),
]


def view():
    hero("Smart Farming Assistant", "AI-powered crop advice for every farmer", icon="🌾")
    st.markdown(
        "Tell us about your farm and get a recommended crop with a complete growing plan."
    )
    cols = st.columns(len(FEATURES))
    for col, (icon, title, text) in zip(cols, FEATURES):
        with col:
            with st.container(border=True):
                st.markdown(f"### {icon}\n**{title}**")
                st.caption(text)
    st.write("")
    if st.button("Get Started ➜", type="primary", use_container_width=True):
        session.go('signin')
