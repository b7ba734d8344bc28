import streamlit as st
from typing import Callable, Optional

from .base import badge, BLUE, PRIMARY_GREEN, CYAN, AMBER
from domain.models import Crop, FarmProfile, PlanStage


def crop_card(crop: Crop, on_select: Callable[[Crop], None], key_prefix: str = "crop"):
    """
    Displays a recommended crop with its facts and a select button.
    """
    with st.container(border=True):
        top = st.columns([5, 2])
        with top[0]:
            st.markdown(f"### {crop.icon} {crop.name}")
            if crop.description:
                st.caption(crop.description)
        with top[1]:
            st.metric("Match", f"{crop.match}%")
        c1, c2, c3, c4 = st.columns(4)
        c1.markdown(f"**Season**  \n{crop.season}")
        c2.markdown(f"**Duration**  \n{crop.duration}")
        c3.markdown(f"**Water**  \n{crop.water_need}")
        c4.markdown(f"**Yield**  \n{crop.expected_yield}")
        if st.button(f"View {crop.name} Plan ➜", key=f"{key_prefix}_{crop.name}", use_container_width=True):
            on_select(crop)


_TILE_COLORS = {
    "Start Date": BLUE,
    "Duration": PRIMARY_GREEN,
    "Irrigation": CYAN,
    "Fertilizer": AMBER,
}


def detail_tile(label: str, value: str, icon: str = ""):
    color = _TILE_COLORS.get(label, PRIMARY_GREEN)
    st.markdown(
        f"""
        <div class='tile' style='border-color:{color}33; background:{color}0d;'>
            <div style='font-size:1.6rem;'>{icon}</div>
            <div style='font-weight:700; color:{color};'>{label}</div>
            <div style='color:{color}; font-size:.9rem;'>{value}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def stage_row(index: int, stage: PlanStage):
    """One numbered entry of the growing-stages timeline."""
    with st.container(border=True):
        cols = st.columns([1, 8, 3])
        cols[0].markdown(f"### {index}")
        cols[1].markdown(f"**{stage.stage}**  \n{stage.description}")
        cols[2].markdown(badge(stage.duration), unsafe_allow_html=True)


def farm_summary(farm: FarmProfile, title: Optional[str] = "Your Farm"):
    with st.container(border=True):
        if title:
            st.markdown(f"**{title}**")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Soil", farm.soil_type or "—")
        c2.metric("Location", farm.location or "—")
        c3.metric("Size (acres)", farm.farm_size or "—")
        c4.metric("Climate", farm.climate or "—")
        if farm.soil_image:
            st.caption(f"📷 Soil image: {farm.soil_image}")
