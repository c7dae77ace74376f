"""Tests for domain.part_planner."""

import pytest

from domain import PartPlanner


@pytest.fixture
def planner():
    return PartPlanner()


class TestPlanParts:
    def test_example_from_long_recording(self, planner):
        """3350s is 55.83 minutes, which needs 3 parts of 24 minutes."""
        assert planner.plan_parts(3350) == 3

    @pytest.mark.parametrize("duration", [0, 1, 60, 24 * 60, 47 * 60])
    def test_never_below_two_parts(self, planner, duration):
        assert planner.plan_parts(duration) >= 2

    def test_exact_multiple_does_not_add_a_part(self, planner):
        assert planner.plan_parts(72 * 60) == 3

    def test_one_second_over_multiple_adds_a_part(self, planner):
        assert planner.plan_parts(72 * 60 + 1) == 4

    def test_very_long_recording(self, planner):
        assert planner.plan_parts(10 * 60 * 60) == 25

    def test_negative_duration_rejected(self, planner):
        with pytest.raises(ValueError):
            planner.plan_parts(-1)

    def test_custom_budget(self):
        planner = PartPlanner(max_minutes_per_part=10, min_parts=1)
        assert planner.plan_parts(5 * 60) == 1
        assert planner.plan_parts(25 * 60) == 3
