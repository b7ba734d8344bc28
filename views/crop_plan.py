import streamlit as st
from services import session
from services.crop_plans import get_crop_plan, crop_name_of, success_tips
from ui.components import hero, detail_tile, stage_row


def view():
    if st.button("◀ Back to Crop Selection"):
        session.go('crops')

    selected = session.get_selected_crop()
    crop_name = crop_name_of(selected)
    if not crop_name:
        st.info("No crop selected yet. Pick a crop from the recommendations first.")
        return

    plan = get_crop_plan(selected)
    icon = selected.get('icon', '') if isinstance(selected, dict) else ''
    hero(f"{crop_name} Growing Plan",
         f"Your complete guide to successful {crop_name.lower()} cultivation", icon=icon or "🌱")

    tiles = [
        ("Start Date", plan.start_date, "📅"),
        ("Duration", plan.duration, "⏱️"),
        ("Irrigation", plan.irrigation, "💧"),
        ("Fertilizer", plan.fertilizer, "🍃"),
    ]
    for col, (label, value, tile_icon) in zip(st.columns(4), tiles):
        with col:
            detail_tile(label, value, tile_icon)

    st.subheader("🎯 Growing Stages Timeline")
    for i, stage in enumerate(plan.stages, start=1):
        stage_row(i, stage)

    st.subheader(f"📈 Success Tips for {crop_name}")
    tips = success_tips()
    half = (len(tips) + 1) // 2
    c1, c2 = st.columns(2)
    c1.markdown("\n".join(f"- {t}" for t in tips[:half]))
    c2.markdown("\n".join(f"- {t}" for t in tips[half:]))

    st.write("")
    if st.button(f"Start My {crop_name} Journey", type="primary", use_container_width=True):
        session.go('dashboard')
    st.caption("Ready to begin? Let's set up your farming dashboard!")
