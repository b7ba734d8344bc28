from dataclasses import dataclass, field, fields
from typing import List, Dict, Optional, Any

from domain.constants import DEFAULT_DISPLAY_NAME


def _filtered(cls, d: Dict[str, Any]) -> Dict[str, Any]:
    allowed = {f.name for f in fields(cls)}
    return {k: v for k, v in (d or {}).items() if k in allowed}


@dataclass
class UserProfile:
    phone: str = ''
    gmail: str = ''
    username: str = ''
    password: str = ''
    name: str = DEFAULT_DISPLAY_NAME


def user_from_dict(d: Dict[str, Any]) -> UserProfile:
    """Safe conversion dropping unknown form keys."""
    return UserProfile(**_filtered(UserProfile, d))


@dataclass
class FarmProfile:
    soil_type: str = ''
    location: str = ''
    farm_size: str = ''
    climate: str = ''
    soil_image: Optional[str] = None  # uploaded file name only


def farm_from_dict(d: Dict[str, Any]) -> FarmProfile:
    return FarmProfile(**_filtered(FarmProfile, d))


@dataclass
class Crop:
    name: str
    icon: str
    match: int  # percent
    season: str
    duration: str
    water_need: str
    expected_yield: str
    description: str = ''


@dataclass
class PlanStage:
    stage: str
    duration: str
    description: str


@dataclass
class CropPlan:
    start_date: str
    duration: str
    irrigation: str
    fertilizer: str
    stages: List[PlanStage] = field(default_factory=list)
