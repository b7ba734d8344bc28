"""Static crop growing plans keyed by crop name, with a generic fallback."""
from typing import Any, Dict, List, Optional

from domain.models import CropPlan, PlanStage


def _stages(rows) -> List[PlanStage]:
    return [PlanStage(stage=s, duration=d, description=desc) for s, d, desc in rows]


PLAN_DETAILS: Dict[str, CropPlan] = {
    "Wheat": CropPlan(
        start_date="March 15, 2025",
        duration="4-5 months",
        irrigation="Moderate - 3-4 times per week",
        fertilizer="NPK 20-10-10 at planting, Urea after 6 weeks",
        stages=_stages([
            ("Planting", "1-2 weeks", "Prepare soil and sow seeds"),
            ("Germination", "2-3 weeks", "Seeds sprout and establish"),
            ("Tillering", "6-8 weeks", "Plant develops multiple shoots"),
            ("Flowering", "2-3 weeks", "Wheat flowers and pollinates"),
            ("Grain Filling", "4-6 weeks", "Grains develop and mature"),
            ("Harvest", "1-2 weeks", "Harvest mature grain"),
        ]),
    ),
    "Tomatoes": CropPlan(
        start_date="April 1, 2025",
        duration="3-4 months",
        irrigation="Daily drip irrigation recommended",
        fertilizer="Balanced 10-10-10 initially, high potassium during fruiting",
        stages=_stages([
            ("Transplanting", "1 week", "Plant seedlings in prepared beds"),
            ("Establishment", "2-3 weeks", "Plants establish root systems"),
            ("Flowering", "4-6 weeks", "Flowers develop continuously"),
            ("Fruit Development", "6-8 weeks", "Fruits form and grow"),
            ("Harvest", "8-12 weeks", "Continuous harvest of ripe fruits"),
        ]),
    ),
    "Carrots": CropPlan(
        start_date="March 1, 2025",
        duration="3-4 months",
        irrigation="Consistent moisture - every 2-3 days",
        fertilizer="Low nitrogen, high phosphorus for root development",
        stages=_stages([
            ("Seeding", "1 week", "Direct sow seeds in rows"),
            ("Germination", "2-3 weeks", "Seeds germinate and emerge"),
            ("Leaf Development", "4-6 weeks", "Foliage grows and photosynthesis begins"),
            ("Root Formation", "6-8 weeks", "Carrot roots develop and expand"),
            ("Maturation", "4-6 weeks", "Roots reach full size and sweetness"),
            ("Harvest", "2-4 weeks", "Harvest mature carrots"),
        ]),
    ),
    "Spinach": CropPlan(
        start_date="February 15, 2025",
        duration="6-8 weeks",
        irrigation="Light, frequent watering",
        fertilizer="High nitrogen for leaf growth",
        stages=_stages([
            ("Seeding", "1 week", "Sow seeds in prepared beds"),
            ("Germination", "1-2 weeks", "Seeds sprout quickly in cool weather"),
            ("Leaf Development", "3-4 weeks", "Rapid leaf growth"),
            ("Harvest Ready", "2-3 weeks", "Continuous harvest of young leaves"),
        ]),
    ),
}

GENERIC_PLAN = CropPlan(
    start_date="Custom date",
    duration="Varies",
    irrigation="Refer to local guidelines",
    fertilizer="Refer to crop-specific recommendations",
    stages=_stages([
        ("Planting", "Varies", "Prepare soil and sow seeds"),
        ("Growth", "Varies", "Monitor crop development and health"),
        ("Harvest", "Varies", "Harvest when crop is mature"),
    ]),
)

SUCCESS_TIPS = [
    "Monitor soil moisture regularly to maintain optimal growing conditions",
    "Apply fertilizer according to the schedule for best results",
    "Watch for common pests and diseases in your region",
    "Harvest at the right time for maximum quality and yield",
]


def crop_name_of(selected: Any) -> Optional[str]:
    """Resolve a display name from a loosely typed crop selection.

    Order: ``crop`` key, then ``name`` key or attribute, then the value itself.
    """
    if selected is None:
        return None
    if isinstance(selected, dict):
        name = selected.get('crop') or selected.get('name')
    else:
        name = getattr(selected, 'crop', None) or getattr(selected, 'name', None)
    if not name and isinstance(selected, str):
        name = selected
    return str(name) if name else None


def get_crop_plan(selected: Any) -> CropPlan:
    """Plan template for the selected crop; unknown crops get the generic plan."""
    return PLAN_DETAILS.get(crop_name_of(selected) or '', GENERIC_PLAN)


def success_tips() -> List[str]:
    return list(SUCCESS_TIPS)
