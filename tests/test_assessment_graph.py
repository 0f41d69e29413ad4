"""
Tests for the change assessment graph.
"""

import pytest

from app.core.errors import PreconditionError
from app.schemas.change import ChangeCategory, RiskTier
from app.services.change_enablement.graph import change_assessment_graph
from app.services.change_enablement.nodes import (
    NODE_ASSESS_RISK,
    NODE_RESOLVE_PATH,
    route_after_classification,
)
from app.services.change_enablement.state import AssessmentState


def run(**graph_input):
    return change_assessment_graph.invoke(graph_input)


class TestRouting:
    def test_normal_with_scores_is_assessed(self):
        state = AssessmentState(
            service_down=False,
            pre_approved=False,
            scores=[1] * 7,
            category=ChangeCategory.NORMAL,
        )
        assert route_after_classification(state) == NODE_ASSESS_RISK

    def test_normal_without_scores_skips_assessment(self):
        state = AssessmentState(
            service_down=False, pre_approved=False, category=ChangeCategory.NORMAL
        )
        assert route_after_classification(state) == NODE_RESOLVE_PATH

    @pytest.mark.parametrize("category", [ChangeCategory.STANDARD, ChangeCategory.EMERGENCY])
    def test_other_categories_skip_assessment_even_with_scores(self, category):
        state = AssessmentState(
            service_down=True, pre_approved=False, scores=[5] * 7, category=category
        )
        assert route_after_classification(state) == NODE_RESOLVE_PATH


class TestGraph:
    def test_emergency(self):
        result = run(service_down=True, pre_approved=False)
        assert result["category"] == ChangeCategory.EMERGENCY
        assert result.get("assessment") is None
        path = result["approval_path"]
        assert "Emergency Change Flow" in path.title
        assert len(path.steps) == 7
        assert path.steps[0] == "Incident declared"
        assert path.steps[-1] == "Mandatory PIR"

    def test_standard(self):
        result = run(service_down=False, pre_approved=True)
        assert result["category"] == ChangeCategory.STANDARD
        assert len(result["approval_path"].steps) == 6

    def test_normal_before_scoring_has_no_path(self):
        result = run(service_down=False, pre_approved=False)
        assert result["category"] == ChangeCategory.NORMAL
        assert result["approval_path"].is_empty

    def test_normal_low(self):
        result = run(service_down=False, pre_approved=False, scores=[1] * 7)
        assert result["assessment"].composite_score == 1.0
        assert result["assessment"].risk_tier == RiskTier.LOW
        path = result["approval_path"]
        assert len(path.steps) == 7
        assert path.steps[0] == "Requester submits RFC"

    def test_normal_medium(self):
        result = run(service_down=False, pre_approved=False, scores=[3] * 7)
        assert result["assessment"].risk_tier == RiskTier.MEDIUM
        assert len(result["approval_path"].steps) == 8

    def test_normal_high(self):
        result = run(service_down=False, pre_approved=False, scores=[5] * 7)
        assert result["assessment"].composite_score == 5.0
        assert result["assessment"].risk_tier == RiskTier.HIGH
        path = result["approval_path"]
        assert len(path.steps) == 10
        assert "CAB review (weekly cadence or ad-hoc)" in path.steps

    def test_invalid_scores_propagate(self):
        with pytest.raises(PreconditionError):
            run(service_down=False, pre_approved=False, scores=[])

    def test_policy_override_via_config(self, policy_copy):
        policy_copy["workflows"]["normal_low"]["title"] = "Custom Low Flow"
        result = change_assessment_graph.invoke(
            {"service_down": False, "pre_approved": False, "scores": [1] * 7},
            config={"configurable": {"policy": policy_copy}},
        )
        assert result["approval_path"].title == "Custom Low Flow"
