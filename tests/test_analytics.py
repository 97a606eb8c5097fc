"""Unit tests for the pure analytics recomputation."""

import itertools

import pytest

from careerpilot.models import JOB_STATUSES, Job
from careerpilot.simulator import recalculate_analytics

APPLIED_LIKE = {"applied", "interviewing", "offered", "rejected", "accepted"}


def make_job(idx: int, status: str) -> Job:
    return Job(
        id=f"job-{idx}",
        title="Engineer",
        company=f"Company {idx}",
        location="Remote",
        type="Full-time",
        fit_score=80,
        status=status,
        description="",
        created_at="2026-10-01T00:00:00.000Z",
        deadline="2026-11-01T00:00:00.000Z",
        salary_range="",
    )


def jobs_with(*statuses: str) -> list[Job]:
    return [make_job(i, s) for i, s in enumerate(statuses, 1)]


class TestRecalculateAnalytics:

    def test_empty_job_list(self):
        a = recalculate_analytics([])
        assert (a.total_applications, a.interview_rate, a.offer_rate, a.response_rate) == (0, 0, 0, 0)
        assert [s.value for s in a.funnel_data] == [0, 0, 0, 0]
        assert [s.value for s in a.status_distribution] == [0, 0, 0, 0]

    def test_only_passive_jobs(self):
        a = recalculate_analytics(jobs_with("new", "saved", "new"))
        assert a.total_applications == 0
        assert a.response_rate == 0

    def test_mixed_pipeline(self):
        a = recalculate_analytics(
            jobs_with("applied", "interviewing", "offered", "rejected", "accepted", "new", "saved")
        )
        # applied=5 interviewing=3 offers=2 rejected=1
        assert a.total_applications == 5
        assert a.interview_rate == 60
        assert a.offer_rate == 40
        assert a.response_rate == 80
        assert [(s.name, s.value) for s in a.funnel_data] == [
            ("Applied", 5), ("Screening", 4), ("Interview", 3), ("Offer", 2),
        ]
        assert [(s.name, s.value, s.color) for s in a.status_distribution] == [
            ("Applied", 1, "#9b87f5"),
            ("Interview", 1, "#F97316"),
            ("Offer", 2, "#10B981"),
            ("Rejected", 1, "#EF4444"),
        ]

    def test_distribution_uses_overlapping_subtraction(self):
        a = recalculate_analytics(jobs_with("interviewing", "rejected", "applied"))
        dist = {s.name: s.value for s in a.status_distribution}
        assert dist == {"Applied": 1, "Interview": 1, "Offer": 0, "Rejected": 1}

    def test_rates_round_half_up(self):
        # 1/8 = 12.5% -> 13, not banker's 12
        a = recalculate_analytics(jobs_with("interviewing", *["applied"] * 7))
        assert a.interview_rate == 13

    def test_rates_round_to_nearest(self):
        a = recalculate_analytics(jobs_with("interviewing", "rejected", "applied"))
        assert a.interview_rate == 33
        assert a.response_rate == 67

    def test_all_rejected(self):
        a = recalculate_analytics(jobs_with("rejected", "rejected"))
        assert a.response_rate == 100
        assert a.funnel_data[1].value == 0

    @pytest.mark.parametrize("statuses", list(itertools.product(JOB_STATUSES, repeat=3)))
    def test_invariants_hold_for_all_small_pipelines(self, statuses):
        a = recalculate_analytics(jobs_with(*statuses))
        expected_total = sum(1 for s in statuses if s in APPLIED_LIKE)

        assert a.total_applications == expected_total
        assert a.funnel_data[0].value == a.total_applications
        for rate in (a.interview_rate, a.offer_rate, a.response_rate):
            assert 0 <= rate <= 100
        if expected_total == 0:
            assert (a.interview_rate, a.offer_rate, a.response_rate) == (0, 0, 0)

    def test_serializes_with_camel_case_keys(self):
        data = recalculate_analytics(jobs_with("applied")).to_dict()
        assert set(data) == {
            "totalApplications", "interviewRate", "offerRate", "responseRate",
            "funnelData", "statusDistribution",
        }
        assert data["funnelData"][0] == {"name": "Applied", "value": 1}
        assert data["statusDistribution"][3] == {"name": "Rejected", "value": 0, "color": "#EF4444"}
