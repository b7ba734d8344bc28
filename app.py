import logging
import streamlit as st
from services import session
from domain.constants import FALLBACK_PAGE
from utils.settings import load_settings
from ui.components import inject_base_css

# Import the page rendering functions from the view modules
from views import landing, sign_in, sign_up, farm_details, recommended_crops, crop_plan, dashboard

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page id to its label, rendering function, and whether it is a wizard step.
PAGE_REGISTRY = {
    "landing": {
        "label": "🏠 Home",
        "render_func": landing.view,
        "step": False,
    },
    "signin": {
        "label": "🔑 Sign In",
        "render_func": sign_in.view,
        "step": True,
    },
    "signup": {
        "label": "📝 Sign Up",
        "render_func": sign_up.view,
        "step": False,
    },
    "farmDetails": {
        "label": "🧑‍🌾 Farm Details",
        "render_func": farm_details.view,
        "step": True,
    },
    "crops": {
        "label": "🌱 Recommended Crops",
        "render_func": recommended_crops.view,
        "step": True,
    },
    "plan": {
        "label": "📅 Crop Plan",
        "render_func": crop_plan.view,
        "step": True,
    },
    "dashboard": {
        "label": "📊 Dashboard",
        "render_func": dashboard.view,
        "step": True,
    },
}


def log_level_value(level: str) -> int:
    """Numeric level for a level name; anything unrecognised means INFO."""
    value = logging.getLevelName((level or "").upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str):
    logging.basicConfig(
        level=log_level_value(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_page(page_key: str) -> str:
    """Return a registered page id; unknown ids fall back to the landing page."""
    if page_key in PAGE_REGISTRY:
        return page_key
    logger.warning("Unknown page '%s', falling back to %s", page_key, FALLBACK_PAGE)
    return FALLBACK_PAGE


def render_progress(page_key: str):
    """Sidebar checklist of wizard steps with the current one highlighted."""
    steps = [k for k, v in PAGE_REGISTRY.items() if v["step"]]
    st.sidebar.title("Your Progress")
    if page_key in steps:
        st.sidebar.progress((steps.index(page_key) + 1) / len(steps))
    for key in steps:
        label = PAGE_REGISTRY[key]["label"]
        st.sidebar.markdown(f"**▶ {label}**" if key == page_key else label)


def main():
    """
    Main application router.

    Exactly one view renders per script run, chosen by the page id held in
    session state. Views change pages through `services.session`.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    st.set_page_config(page_title=settings.app_title, page_icon="🌾", layout="wide")
    inject_base_css()

    session.init_state(start_page=settings.start_page)
    page_key = resolve_page(session.current_page())
    if page_key != session.current_page():
        session.navigate(page_key)

    render_progress(page_key)

    # --- Page Rendering ---
    PAGE_REGISTRY[page_key]["render_func"]()


if __name__ == "__main__":
    main()
