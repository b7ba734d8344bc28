"""Static crop catalogue shown on the recommended-crops page.

No scoring happens here: the catalogue is fixed and the farm profile is only
echoed back by the view.
"""
from typing import List, Optional

from domain.models import Crop, FarmProfile

CROP_CATALOGUE: List[Crop] = [
    Crop(name="Wheat", icon="🌾", match=95, season="Rabi (Winter)", duration="4-5 months",
         water_need="Moderate", expected_yield="3-4 tons/acre",
         description="Hardy cereal that suits loamy and clay soils."),
    Crop(name="Tomatoes", icon="🍅", match=88, season="Spring-Summer", duration="3-4 months",
         water_need="High", expected_yield="20-25 tons/acre",
         description="High-value vegetable with continuous harvest."),
    Crop(name="Carrots", icon="🥕", match=82, season="Winter", duration="3-4 months",
         water_need="Moderate", expected_yield="10-12 tons/acre",
         description="Root crop that prefers loose, well-drained soil."),
    Crop(name="Spinach", icon="🥬", match=78, season="Winter", duration="6-8 weeks",
         water_need="Low-Moderate", expected_yield="4-6 tons/acre",
         description="Fast leafy green, ready within two months."),
    Crop(name="Rice", icon="🍚", match=70, season="Kharif (Monsoon)", duration="4-6 months",
         water_need="Very High", expected_yield="2-3 tons/acre",
         description="Staple grain for flooded clay fields."),
]


def recommended_crops(farm: Optional[FarmProfile] = None) -> List[Crop]:
    return sorted(CROP_CATALOGUE, key=lambda c: c.match, reverse=True)


def find_crop(name: str) -> Optional[Crop]:
    return next((c for c in CROP_CATALOGUE if c.name == name), None)
