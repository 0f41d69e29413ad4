"""
Change assessment service.

Parses form answers, runs the assessment graph and builds the page view.
Nothing is stored between calls: callers send the answers again with the
risk scores.
"""

from typing import Any, Dict, List, Optional, Sequence, Union
import uuid

from app.core.errors import IncompleteInputError, PreconditionError
from app.core.logging import get_logger
from app.schemas.assessment_view import AssessmentView
from app.schemas.change import ChangeCategory
from app.services.change_enablement.graph import change_assessment_graph
from app.services.change_enablement.policy.loader import get_risk_dimensions
from app.services.change_enablement.presentation import (
    classification_view,
    initial_view,
    risk_view,
)
from app.services.change_enablement.risk import validate_scores

logger = get_logger(__name__)

Choice = Union[str, bool, None]

_TRUE_CHOICES = {"yes", "true"}
_FALSE_CHOICES = {"no", "false"}


def parse_choice(value: Choice, field: str) -> bool:
    """
    Convert a single-choice form answer to a bool.

    Raises:
        IncompleteInputError: If the choice is missing.
        PreconditionError: If the value is not a yes/no answer.
    """
    if isinstance(value, bool):
        return value
    if value is None or not str(value).strip():
        raise IncompleteInputError([field])

    normalized = str(value).strip().lower()
    if normalized in _TRUE_CHOICES:
        return True
    if normalized in _FALSE_CHOICES:
        return False
    raise PreconditionError(f"Invalid answer for {field}: {value!r}")


def parse_answers(service_down: Choice, pre_approved: Choice) -> tuple[bool, bool]:
    """Parse both required answers, reporting every missing one at once."""
    missing = [
        field
        for field, value in (("service_down", service_down), ("pre_approved", pre_approved))
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        logger.warning("Classification rejected, missing choices: %s", missing)
        raise IncompleteInputError(missing)
    return (
        parse_choice(service_down, "service_down"),
        parse_choice(pre_approved, "pre_approved"),
    )


class ChangeAssessmentService:
    def __init__(self, policy: Optional[Dict[str, Any]] = None):
        self.policy = policy

    def _config(self) -> dict:
        if self.policy is None:
            return {}
        return {"configurable": {"policy": self.policy}}

    def run_assessment(
        self,
        service_down: bool,
        pre_approved: bool,
        scores: Optional[Sequence[int]] = None,
        run_id: Optional[str] = None,
    ) -> dict:
        """
        Run the assessment graph.

        One run_id is shared by every node of the run.

        Returns:
            Final graph state dict (category, assessment, approval_path).
        """
        graph_input = {
            "run_id": run_id or str(uuid.uuid4()),
            "service_down": service_down,
            "pre_approved": pre_approved,
            "scores": list(scores) if scores is not None else None,
        }
        return change_assessment_graph.invoke(graph_input, config=self._config())

    def submit_classification(
        self, service_down: Choice, pre_approved: Choice
    ) -> AssessmentView:
        """Handle the classification form."""
        service_down, pre_approved = parse_answers(service_down, pre_approved)
        result = self.run_assessment(service_down, pre_approved)
        return classification_view(
            service_down,
            pre_approved,
            result["category"],
            result["approval_path"],
            self.policy,
        )

    def submit_risk_scores(
        self,
        service_down: Choice,
        pre_approved: Choice,
        scores: List[int],
    ) -> AssessmentView:
        """
        Handle the risk sliders for a Normal change.

        Raises:
            PreconditionError: If the answers do not classify as Normal, the
                scores are invalid, or there is not one score per dimension.
        """
        service_down, pre_approved = parse_answers(service_down, pre_approved)
        validate_scores(scores)
        dimensions = get_risk_dimensions(self.policy)
        if len(scores) != len(dimensions):
            raise PreconditionError(
                f"Expected {len(dimensions)} risk scores, got {len(scores)}"
            )

        result = self.run_assessment(service_down, pre_approved, scores)
        if result["category"] != ChangeCategory.NORMAL:
            raise PreconditionError(
                f"Risk scores only apply to Normal changes, got {result['category'].value}"
            )
        return risk_view(
            service_down,
            pre_approved,
            scores,
            result["assessment"],
            result["approval_path"],
            self.policy,
        )

    def assess(
        self,
        service_down: Choice,
        pre_approved: Choice,
        scores: Optional[List[int]] = None,
    ) -> AssessmentView:
        """Classify, and score too when scores are given for a Normal change."""
        if scores is None:
            return self.submit_classification(service_down, pre_approved)
        return self.submit_risk_scores(service_down, pre_approved, scores)

    def reset(self) -> AssessmentView:
        """Clear all derived state and return the initial page."""
        return initial_view(self.policy)
