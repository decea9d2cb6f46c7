"""
Pydantic schemas for the dashboard.
"""
from pydantic import BaseModel
from typing import List, Optional
from moodwall.schemas.checkin import MoodCheckinResponse


class ChartPoint(BaseModel):
    date: str
    date_key: str
    value: Optional[int] = None


class DashboardResponse(BaseModel):
    """Schema for dashboard response."""
    checkins: List[MoodCheckinResponse] = []
    total_checkins: int = 0
    streak: int = 0
    checked_in_today: bool = False
    chart: List[ChartPoint] = []
