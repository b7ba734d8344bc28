import streamlit as st
import pandas as pd
from dataclasses import asdict
from services import session
from services.crop_plans import get_crop_plan, crop_name_of
from ui.components import hero, farm_summary


def stages_frame(plan) -> pd.DataFrame:
    """Growing stages as a table with a 1-based step column."""
    rows = [asdict(s) for s in plan.stages]
    df = pd.DataFrame(rows, columns=['stage', 'duration', 'description'])
    df.insert(0, 'step', range(1, len(df) + 1))
    df.columns = ['Step', 'Stage', 'Duration', 'What to do']
    return df


def view():
    if st.button("◀ Back to Plan"):
        session.go('plan')

    user = session.get_user()
    farm = session.get_farm()
    selected = session.get_selected_crop()
    crop_name = crop_name_of(selected) or "—"

    hero(f"Welcome, {user.name}!", "Your farming dashboard", icon="🚜")

    c1, c2, c3 = st.columns(3)
    c1.metric("Username", user.username or "—")
    c2.metric("Phone", user.phone or "—")
    c3.metric("Current Crop", crop_name)

    farm_summary(farm)

    plan = get_crop_plan(selected)
    st.subheader("Growing Plan")
    p1, p2, p3, p4 = st.columns(4)
    p1.markdown(f"**Start**  \n{plan.start_date}")
    p2.markdown(f"**Duration**  \n{plan.duration}")
    p3.markdown(f"**Irrigation**  \n{plan.irrigation}")
    p4.markdown(f"**Fertilizer**  \n{plan.fertilizer}")
    st.dataframe(stages_frame(plan), hide_index=True, use_container_width=True)

    a1, a2 = st.columns(2)
    if a1.button("➕ New Plan", type="primary", use_container_width=True):
        session.go('farmDetails')
    if a2.button("Sign out", use_container_width=True):
        session.sign_out()
        st.rerun()
