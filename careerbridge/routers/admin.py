import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerbridge.database import get_db
from careerbridge.dependencies import get_current_admin
from careerbridge.models.account import Account
from careerbridge.repos.admin_repo import get_stats
from careerbridge.schemas.application import DashboardStats

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    admin: Account = Depends(get_current_admin),
):
    """Return dashboard stats. Admin only."""
    return DashboardStats(**get_stats(db))
