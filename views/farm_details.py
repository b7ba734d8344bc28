import streamlit as st
from services import session
from domain.constants import SOIL_TYPES, CLIMATES, SOIL_IMAGE_TYPES
from ui.components import hero, field_error


def _index(options, value):
    # Selectbox with index=None shows the placeholder until a choice is made
    return options.index(value) if value in options else None


def view():
    if st.button("◀ Back"):
        session.clear_errors('farmDetails')
        session.go('signin')

    hero("Tell Us About Your Farm", "We use these details to suggest crops that suit your land")
    farm = session.get_farm()
    errors = session.get_errors('farmDetails')

    with st.form("form_farm", clear_on_submit=False):
        soil_type = st.selectbox("Soil Type", SOIL_TYPES, index=_index(SOIL_TYPES, farm.soil_type),
                                 placeholder="Select soil type", key="farm_soil_type")
        field_error(errors, 'soil_type')
        soil_image = st.file_uploader("Soil Image (optional)", type=SOIL_IMAGE_TYPES, key="farm_soil_image")
        location = st.text_input("Location", value=farm.location, key="farm_location",
                                 placeholder="Village, district or state")
        field_error(errors, 'location')
        farm_size = st.text_input("Farm Size (acres)", value=farm.farm_size, key="farm_size",
                                  placeholder="e.g. 2.5")
        field_error(errors, 'farm_size')
        climate = st.selectbox("Climate", CLIMATES, index=_index(CLIMATES, farm.climate),
                               placeholder="Select climate", key="farm_climate")
        field_error(errors, 'climate')

        if st.form_submit_button("Get Crop Recommendations ➜", type="primary", use_container_width=True):
            session.submit_farm_details({
                'soil_type': soil_type or '',
                'location': location,
                'farm_size': farm_size,
                'climate': climate or '',
                'soil_image': soil_image.name if soil_image is not None else None,
            })
            st.rerun()
