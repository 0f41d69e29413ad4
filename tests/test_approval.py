"""
Tests for approval path resolution.
"""

import pytest
from pydantic import ValidationError

from app.core.errors import PolicyError, PreconditionError
from app.schemas.change import ApprovalPath, ChangeCategory, RiskTier
from app.services.change_enablement.approval import resolve_approval_path

STANDARD_STEPS = (
    "Requester triggers pipeline",
    "Automated pre-checks (lint, test, scan)",
    "Auto-approved (change model match verified)",
    "Deploy",
    "Automated validation",
    "Change record logged automatically",
)

EMERGENCY_STEPS = (
    "Incident declared",
    "Emergency RFC created (minimal fields)",
    "ECAB approval (phone/chat, 2 approvers minimum)",
    "Implement immediately",
    "Validate service restored",
    "Retrospective RFC completion (within 48h)",
    "Mandatory PIR",
)

NORMAL_LOW_STEPS = (
    "Requester submits RFC",
    "Automated risk scoring",
    "Peer review (1 reviewer, async)",
    "Approved → Scheduled in change calendar",
    "Deploy in approved window",
    "Validation",
    "Close RFC",
)

NORMAL_MEDIUM_STEPS = (
    "Requester submits RFC",
    "Automated risk scoring",
    "Technical review (architect or senior engineer)",
    "Change authority approval",
    "Scheduled in change calendar (with conflict check)",
    "Deploy with monitoring",
    "Validation + brief PIR",
    "Close RFC",
)

NORMAL_HIGH_STEPS = (
    "Requester submits RFC",
    "Automated risk scoring",
    "Technical review + security review",
    "Pre-CAB: documentation completeness check",
    "CAB review (weekly cadence or ad-hoc)",
    "Senior management sign-off",
    "Scheduled with communication plan",
    "Deploy with war-room / bridge call",
    "Validation + full PIR",
    "Close RFC",
)


class TestWorkflows:
    def test_standard(self):
        path = resolve_approval_path(ChangeCategory.STANDARD)
        assert path.title == "Standard Change Flow (Section 4.1)"
        assert path.steps == STANDARD_STEPS

    def test_emergency(self):
        path = resolve_approval_path(ChangeCategory.EMERGENCY)
        assert path.title == "Emergency Change Flow (Section 4.5)"
        assert path.steps == EMERGENCY_STEPS

    def test_normal_low(self):
        path = resolve_approval_path(ChangeCategory.NORMAL, RiskTier.LOW)
        assert path.title == "Normal Change Flow — Low Risk (Section 4.2)"
        assert path.steps == NORMAL_LOW_STEPS

    def test_normal_medium(self):
        path = resolve_approval_path(ChangeCategory.NORMAL, RiskTier.MEDIUM)
        assert path.title == "Normal Change Flow — Medium Risk (Section 4.3)"
        assert path.steps == NORMAL_MEDIUM_STEPS

    def test_normal_high(self):
        path = resolve_approval_path(ChangeCategory.NORMAL, RiskTier.HIGH)
        assert path.title == "Normal Change Flow — High Risk (Section 4.4)"
        assert path.steps == NORMAL_HIGH_STEPS

    def test_accepts_string_values(self):
        assert resolve_approval_path("Normal", "High").steps == NORMAL_HIGH_STEPS


class TestTierHandling:
    @pytest.mark.parametrize(
        "tier", [None, "", RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH, "bogus"]
    )
    def test_standard_ignores_tier(self, tier):
        path = resolve_approval_path(ChangeCategory.STANDARD, tier)
        assert path.steps == STANDARD_STEPS
        assert len(path.steps) == 6

    @pytest.mark.parametrize("tier", [None, "", RiskTier.HIGH, "bogus"])
    def test_emergency_ignores_tier(self, tier):
        assert resolve_approval_path(ChangeCategory.EMERGENCY, tier).steps == EMERGENCY_STEPS

    @pytest.mark.parametrize("tier", [None, "", "Critical"])
    def test_normal_without_tier_is_empty(self, tier):
        path = resolve_approval_path("Normal", tier)
        assert path == ApprovalPath()
        assert path.title == ""
        assert path.steps == ()
        assert path.is_empty


class TestErrors:
    @pytest.mark.parametrize("category", ["Major", "", "standard"])
    def test_unknown_category_rejected(self, category):
        with pytest.raises(PreconditionError):
            resolve_approval_path(category, RiskTier.LOW)

    def test_missing_workflow_in_policy(self, policy_copy):
        del policy_copy["workflows"]["normal_medium"]
        with pytest.raises(PolicyError):
            resolve_approval_path(ChangeCategory.NORMAL, RiskTier.MEDIUM, policy_copy)

    def test_paths_are_immutable(self):
        path = resolve_approval_path(ChangeCategory.STANDARD)
        with pytest.raises(ValidationError):
            path.title = "changed"
