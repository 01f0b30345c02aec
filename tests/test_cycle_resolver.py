"""Tests de la resolución de régimen y ventanas."""

from datetime import date

from evaluation_compliance.core.models import Regime
from evaluation_compliance.core.services import CycleResolver, resolve_cycle


class TestRegimeSelection:

    def test_first_year_is_onboarding(self):
        plan = resolve_cycle(date(2023, 1, 10), None, date(2023, 2, 1))
        assert plan.regime == Regime.ONBOARDING
        assert plan.days_since_hire == 22
        assert plan.annual_window is None

    def test_exactly_365_days_is_still_onboarding(self):
        plan = resolve_cycle(date(2022, 1, 10), None, date(2023, 1, 10))
        assert plan.days_since_hire == 365
        assert plan.regime == Regime.ONBOARDING

    def test_366_days_is_annual(self):
        plan = resolve_cycle(date(2022, 1, 10), None, date(2023, 1, 11))
        assert plan.regime == Regime.ANNUAL
        assert plan.annual_window.end == date(2024, 1, 10)


class TestAnnualWindow:

    def test_upcoming_anniversary_this_year(self):
        plan = resolve_cycle(date(2020, 9, 1), None, date(2023, 6, 1))
        assert plan.annual_window.start == date(2022, 9, 1)
        assert plan.annual_window.end == date(2023, 9, 1)
        assert plan.annual_window.includes_end

    def test_past_anniversary_rolls_forward(self):
        plan = resolve_cycle(date(2020, 1, 10), None, date(2023, 6, 1))
        assert plan.annual_window.start == date(2023, 1, 10)
        assert plan.annual_window.end == date(2024, 1, 10)

    def test_anniversary_today_rolls_forward(self):
        plan = resolve_cycle(date(2020, 3, 15), None, date(2023, 3, 15))
        assert plan.annual_window.end == date(2024, 3, 15)
        assert plan.annual_window.start == date(2023, 3, 15)

    def test_anchor_date_overrides_hire_anniversary(self):
        plan = resolve_cycle(date(2019, 5, 20), date(2021, 9, 1), date(2023, 6, 1))
        assert plan.annual_window.end == date(2023, 9, 1)

    def test_leap_day_reference(self):
        plan = resolve_cycle(date(2020, 2, 29), None, date(2023, 3, 1))
        assert plan.annual_window.start == date(2023, 2, 28)
        assert plan.annual_window.end == date(2024, 2, 29)


class TestOnboardingPhases:

    def test_phase_boundaries(self):
        plan = resolve_cycle(date(2023, 1, 10), None, date(2023, 2, 1))
        first, second = plan.phases

        assert (first.start_day, first.end_day) == (0, 90)
        assert first.window.start == date(2023, 1, 10)
        assert first.window.end == date(2023, 4, 10)
        assert not first.window.includes_end
        assert first.active

        assert (second.start_day, second.end_day) == (90, 365)
        assert second.window.start == date(2023, 4, 10)
        assert second.window.end == date(2024, 1, 10)
        assert not second.active

    def test_alert_thresholds_follow_phase_span(self):
        plan = resolve_cycle(date(2023, 1, 10), None, date(2023, 2, 1))
        assert [phase.alert_days for phase in plan.phases] == [20, 45]

    def test_second_phase_activates_on_day_90(self):
        plan = resolve_cycle(date(2023, 1, 10), None, date(2023, 4, 10))
        assert plan.phases[1].active


class TestAlertDaysOverride:

    def test_explicit_annual_threshold(self):
        assert CycleResolver(annual_alert_days=30).annual_alert_days == 30

    def test_default_annual_threshold(self):
        assert CycleResolver().annual_alert_days == 45
