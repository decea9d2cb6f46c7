"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker
from moodwall.api.dependencies import SessionContext, require_actor
from moodwall.db.session import get_session_factory
from moodwall.schemas.checkin import MoodCheckinResponse
from moodwall.schemas.dashboard import DashboardResponse
from moodwall.services.dashboard_service import load_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    context: SessionContext = Depends(require_actor),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Get streak, today status, recent check-ins and the 7-day chart."""
    data = await load_dashboard(session_factory, context.current_user_id)
    data["checkins"] = [MoodCheckinResponse.model_validate(c) for c in data["checkins"]]
    return DashboardResponse(**data)
