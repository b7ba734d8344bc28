"""View modules for manual routing.

The app uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system, since the wizard order is driven by session state rather
than by the sidebar. Every page lives under `views/` and exposes a `view()`
function.

Add any new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py` (and in `domain.constants.PAGES`).
"""
