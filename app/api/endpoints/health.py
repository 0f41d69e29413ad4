from fastapi import APIRouter

from app.core.config import settings
from app.services.change_enablement.policy.loader import get_workflows

router = APIRouter()


@router.get("")
def health_check():
    """
    Check the health of the API and that the change policy is loadable.
    """
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "workflows": len(get_workflows()),
    }
