"""
Reusable UI components for the Streamlit application.

- `base`: CSS injection, hero banner, inline field errors and badges.
- `cards`: crop cards, plan detail tiles, stage rows and the farm summary.

Import from here (`from ui import components`) rather than the submodules.
"""

from .base import (
    inject_base_css,
    hero,
    field_error,
    badge,
)

from .cards import (
    crop_card,
    detail_tile,
    stage_row,
    farm_summary,
)
