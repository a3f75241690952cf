import logging
import math

import pytest

from sidss.constants import IRRSettings
from sidss.errors import InvalidDesignParametersError
from sidss.inputs import EconomicParams, MaintenanceParams, PolicyParams
from sidss.models import FinancialModel, build_cash_flows, discount_cash_flows, solve_irr


def analyze(cost=600000, maintenance=None, economics=None, years=50, policy=None):
    return FinancialModel().analyze(
        cost,
        maintenance or MaintenanceParams(15000, 0.02),
        economics or EconomicParams(0.05, 250000),
        years,
        policy or PolicyParams(10, 25, 60),
    )


class TestCashFlows:
    def test_series_layout(self):
        schedule = build_cash_flows(
            600000, MaintenanceParams(15000, 0.02), EconomicParams(0.05, 250000), 50, PolicyParams(10, 25, 60)
        )

        assert len(schedule.cash_flows) == 51
        assert schedule.initial_investment == pytest.approx(540000)
        assert schedule.cash_flows[0] == -schedule.initial_investment
        assert schedule.annual_carbon_tax == 2500
        assert schedule.cash_flows[1] == pytest.approx(250000 - 15000 * 1.02 - 2500)

    def test_maintenance_compounds_with_degradation(self):
        schedule = build_cash_flows(
            1000, MaintenanceParams(100, 0.1), EconomicParams(0.0, 0.0), 2, PolicyParams(0, 0, 0)
        )

        assert schedule.maintenance == pytest.approx((110.0, 121.0))
        assert schedule.cash_flows[1:] == pytest.approx((-110.0, -121.0))
        assert schedule.total_maintenance == pytest.approx(231.0)

    def test_carbon_tax_uses_fixed_volume(self):
        schedule = build_cash_flows(
            1000, MaintenanceParams(0, 0), EconomicParams(0.0, 0.0), 3, PolicyParams(0, 40, 0)
        )

        assert schedule.cash_flows[1:] == (-4000.0, -4000.0, -4000.0)

    def test_discounting_at_zero_rate_is_plain_sum(self):
        assert discount_cash_flows([-1000, 400, 400, 400], 0.0) == 200.0


class TestIRRSolver:
    def test_one_year_root(self):
        solution = solve_irr([-1000, 1100])

        assert solution.converged
        assert solution.rate == pytest.approx(0.10, abs=1e-4)
        assert solution.iterations <= 20

    def test_two_year_root(self):
        solution = solve_irr([-1000, 0, 1210])

        assert solution.converged
        assert solution.rate == pytest.approx(0.10, abs=1e-4)

    def test_root_away_from_initial_guess(self):
        solution = solve_irr([-1000, 1500])

        assert solution.converged
        assert solution.rate == pytest.approx(0.5, abs=1e-4)

    def test_flat_derivative_stops_at_initial_rate(self):
        solution = solve_irr([0, 0, 0])

        assert not solution.converged
        assert solution.rate == 0.10
        assert solution.iterations == 0

    def test_iteration_cap_returns_last_rate(self):
        solution = solve_irr([-1000, 500, 700], IRRSettings(max_iterations=1))

        assert not solution.converged
        assert solution.iterations == 1
        assert solution.rate != 0.10

    def test_overflowing_discount_factor_stops_iteration(self):
        solution = solve_irr([-1000.0] + [100.0] * 8000)

        assert not solution.converged
        assert solution.rate == 0.10
        assert solution.iterations == 0

    def test_rate_of_minus_one_stops_iteration(self):
        solution = solve_irr([-1000, 1100], IRRSettings(initial_rate=-1.0))

        assert not solution.converged
        assert solution.rate == -1.0
        assert math.isfinite(solution.rate)

    def test_non_finite_step_keeps_last_rate(self):
        # NPV itself overflows to inf while the derivative stays finite
        solution = solve_irr([1e308, 1e308])

        assert not solution.converged
        assert solution.rate == 0.10
        assert solution.iterations == 1

    def test_no_root_does_not_raise(self):
        solution = solve_irr([100, 100])

        assert not solution.converged


class TestFinancialModel:
    def test_reference_scenario(self):
        metrics = analyze()

        assert metrics.initial_investment == pytest.approx(540000)
        assert metrics.npv > 0
        # Profitable far beyond the investment, so the score is capped
        assert metrics.financial_score == 100.0
        assert metrics.payback_period == 0.0
        assert metrics.irr_converged
        assert discount_cash_flows(metrics.cash_flows, metrics.irr / 100) == pytest.approx(0, abs=10)

    def test_life_cycle_cost_adds_accumulated_maintenance(self):
        metrics = analyze(
            cost=1000,
            maintenance=MaintenanceParams(100, 0.1),
            economics=EconomicParams(0.05, 500),
            years=2,
            policy=PolicyParams(0, 0, 0),
        )

        assert metrics.life_cycle_cost == pytest.approx(1231.0)

    def test_break_even_scores_exactly_50(self):
        metrics = analyze(
            cost=1000,
            maintenance=MaintenanceParams(0, 0),
            economics=EconomicParams(0.0, 100),
            years=10,
            policy=PolicyParams(0, 0, 0),
        )

        assert metrics.npv == 0.0
        assert metrics.financial_score == 50.0

    def test_loss_making_project_floors_at_zero(self):
        metrics = analyze(economics=EconomicParams(0.05, -100000))

        assert metrics.npv < 0
        assert metrics.financial_score == 0.0

    def test_score_increases_with_npv(self):
        scores = [
            analyze(
                cost=100000,
                maintenance=MaintenanceParams(0, 0),
                economics=EconomicParams(0.05, benefit),
                years=20,
                policy=PolicyParams(0, 0, 0),
            ).financial_score
            for benefit in (0, 4000, 8000, 10000, 12000)
        ]

        assert scores == sorted(scores)
        assert all(0 <= s <= 100 for s in scores)

    def test_zero_initial_investment_is_invalid(self):
        with pytest.raises(InvalidDesignParametersError) as exc:
            analyze(cost=0)

        assert exc.value.parameter == "initial_investment"

    def test_full_subsidy_is_invalid(self):
        with pytest.raises(InvalidDesignParametersError):
            analyze(policy=PolicyParams(100, 25, 60))

    def test_non_convergence_is_logged(self, caplog):
        model = FinancialModel()
        with caplog.at_level(logging.WARNING, logger="sidss.models.financial"):
            metrics = model.analyze(
                1000, MaintenanceParams(0, 0), EconomicParams(0.05, -100), 5, PolicyParams(0, 0, 0)
            )

        assert not metrics.irr_converged
        assert "IRR did not converge" in caplog.text

    def test_discount_rate_of_minus_one_is_invalid(self):
        with pytest.raises(InvalidDesignParametersError) as exc:
            analyze(economics=EconomicParams(-1.0, 250000))

        assert exc.value.parameter == "discount_rate"

    def test_discount_factor_out_of_range_is_invalid(self):
        # 5.0 entered for "5%" over a 400-year life
        with pytest.raises(InvalidDesignParametersError) as exc:
            analyze(economics=EconomicParams(5.0, 250000), years=400)

        assert exc.value.parameter == "discount_rate"

    def test_maintenance_growth_out_of_range_is_invalid(self):
        with pytest.raises(InvalidDesignParametersError) as exc:
            analyze(maintenance=MaintenanceParams(15000, 5.0), years=400)

        assert exc.value.parameter == "degradation_rate"

    def test_metrics_carry_maintenance_schedule(self):
        metrics = analyze()

        assert len(metrics.maintenance_costs) == 50
        assert metrics.maintenance_costs[0] == pytest.approx(15300)
        assert metrics.annual_carbon_tax == 2500
