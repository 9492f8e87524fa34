"""
Test cases for match reports
"""
import json

import pytest

from mentormatch.evaluation import (
    compute_score_distribution_stats,
    compute_mentor_demand,
    create_match_report,
)
from mentormatch.ranking import MentorRanker
from mentormatch.records import Mentee, Mentor


@pytest.fixture
def rankings(mentee_intj, mentor_a, mentor_b, example_weights):
    return MentorRanker(top_n=2).match_all([mentee_intj], [mentor_a, mentor_b], example_weights)


class TestScoreDistribution:
    """Test cases for compute_score_distribution_stats"""

    def test_basic_stats(self):
        stats = compute_score_distribution_stats([0.0, 0.5, 1.0])
        assert stats.mean == pytest.approx(0.5)
        assert stats.min == 0.0
        assert stats.max == 1.0
        assert stats.quantiles["p50"] == pytest.approx(0.5)

    def test_empty_scores(self):
        stats = compute_score_distribution_stats([])
        assert stats.mean == 0.0
        assert set(stats.quantiles) == {"p10", "p25", "p50", "p75", "p90"}


class TestMentorDemand:
    """Test cases for compute_mentor_demand"""

    def test_counts(self, rankings, mentor_a, mentor_b):
        demand = compute_mentor_demand(rankings, [mentor_a, mentor_b])
        assert [d.mentor_id for d in demand] == [1, 2]
        assert demand[0].appearances == 1
        assert demand[0].first_choice == 1
        assert demand[1].first_choice == 0
        assert not demand[0].over_capacity

    def test_over_capacity(self, example_weights):
        solo = Mentor(last_work_role="Lead", location="NYC", max_match=1, id=1)
        mentees = [Mentee(last_work_role="A", location="NYC", id=i) for i in (1, 2)]
        rankings = MentorRanker().match_all(mentees, [solo], example_weights)
        demand = compute_mentor_demand(rankings, [solo])
        assert demand[0].first_choice == 2
        assert demand[0].over_capacity

    def test_lower_ranked_appearances_do_not_count(self, example_weights):
        """Only first choices are compared with max_match"""
        strong = Mentor(last_work_role="Lead", location="NYC", max_match=1, id=1)
        backup = Mentor(last_work_role="Backup", location="LA", max_match=1, id=2)
        mentees = [Mentee(last_work_role="A", location="NYC", id=i) for i in (1, 2, 3)]
        rankings = MentorRanker(top_n=2).match_all(mentees, [strong, backup], example_weights)
        demand = compute_mentor_demand(rankings, [strong, backup])
        assert demand[1].appearances == 3
        assert demand[1].first_choice == 0
        assert not demand[1].over_capacity
        assert demand[0].over_capacity

    def test_no_capacity_never_over(self, example_weights):
        open_mentor = Mentor(last_work_role="Lead", location="NYC", id=1)
        mentees = [Mentee(last_work_role="A", location="NYC", id=i) for i in (1, 2)]
        rankings = MentorRanker().match_all(mentees, [open_mentor], example_weights)
        assert not compute_mentor_demand(rankings, [open_mentor])[0].over_capacity


class TestMatchReport:
    """Test cases for create_match_report"""

    def test_report(self, rankings, mentor_a, mentor_b):
        report = create_match_report(rankings, [mentor_a, mentor_b])
        assert report.n_mentors == 2
        assert report.n_mentees == 1
        assert report.coverage == pytest.approx(1.0)
        assert report.best_score_stats.max == pytest.approx(0.75)
        assert "Match Report" in report.summary()

    def test_empty_rankings(self):
        report = create_match_report({}, [])
        assert report.coverage == 0.0
        assert report.mentor_demand == []

    def test_save(self, rankings, mentor_a, mentor_b, tmp_path):
        path = tmp_path / "report.json"
        create_match_report(rankings, [mentor_a, mentor_b]).save(str(path))
        data = json.loads(path.read_text())
        assert data["n_mentees"] == 1
        assert data["mentor_demand"][0]["mentor_id"] == 1
