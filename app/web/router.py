"""
Web Router - HTMX / Template responses

All routes that return HTML (full pages or partials) live here.
This keeps the API layer clean for pure JSON endpoints.
"""

import os
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates

from app.core.errors import IncompleteInputError, PreconditionError
from app.core.logging import get_logger
from app.schemas.assessment_view import AssessmentView
from app.services.change_enablement.assessments import ChangeAssessmentService
from app.services.change_enablement.policy.loader import get_risk_dimensions

logger = get_logger(__name__)

router = APIRouter()
templates = Jinja2Templates(
    directory=os.path.join(os.path.dirname(__file__), "..", "templates")
)


def get_assessment_service() -> ChangeAssessmentService:
    """Get assessment service (Dependency Injection)."""
    return ChangeAssessmentService()


ServiceDep = Annotated[ChangeAssessmentService, Depends(get_assessment_service)]


def _render(request: Request, view: AssessmentView, error: str = "", status_code: int = 200):
    context = {"view": view, "error": error}

    # If HTMX request, return the results partial
    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(
            request, "partials/results.html", context, status_code=status_code
        )

    # Full page load
    return templates.TemplateResponse(
        request, "index.html", context, status_code=status_code
    )


# -----------------------------------------------------------------------------
# Page Routes
# -----------------------------------------------------------------------------


@router.get("/")
def root(request: Request, service: ServiceDep):
    return _render(request, service.reset())


@router.post("/classify")
async def classify_form(request: Request, service: ServiceDep):
    """Classification form: both radio groups are required."""
    form = await request.form()
    try:
        view = service.submit_classification(
            form.get("service_down"), form.get("pre_approved")
        )
    except (IncompleteInputError, PreconditionError) as e:
        logger.warning("Classification form rejected: %s", e)
        return _render(request, service.reset(), error=str(e), status_code=422)
    return _render(request, view)


@router.post("/assess")
async def assess_form(request: Request, service: ServiceDep):
    """Risk slider form; the classification answers ride along as hidden fields."""
    form = await request.form()
    try:
        scores = [
            int(form.get(dimension.key, ""))
            for dimension in get_risk_dimensions(service.policy)
        ]
    except ValueError:
        logger.warning("Risk form rejected: non-integer slider value")
        return _render(
            request,
            service.reset(),
            error="Every risk dimension needs a score from 1 to 5.",
            status_code=422,
        )

    try:
        view = service.submit_risk_scores(
            form.get("service_down"), form.get("pre_approved"), scores
        )
    except (IncompleteInputError, PreconditionError) as e:
        logger.warning("Risk form rejected: %s", e)
        return _render(request, service.reset(), error=str(e), status_code=422)
    return _render(request, view)


@router.post("/reset")
def reset_form(request: Request, service: ServiceDep):
    """Start over: drop every derived panel."""
    return _render(request, service.reset())
