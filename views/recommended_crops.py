import streamlit as st
from dataclasses import asdict
from services import session
from services.recommendations import recommended_crops
from ui.components import hero, crop_card, farm_summary


def _choose(crop):
    session.select_crop(asdict(crop))
    st.rerun()


def view():
    if st.button("◀ Back to Farm Details"):
        session.go('farmDetails')

    farm = session.get_farm()
    hero("Recommended Crops", "Best matches for your farm conditions")
    farm_summary(farm)

    st.subheader("Top picks")
    for crop in recommended_crops(farm):
        crop_card(crop, on_select=_choose)
