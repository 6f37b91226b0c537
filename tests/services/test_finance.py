import pytest

from fincalc.services.finance import (
    calculate_emi,
    calculate_sip,
    calculate_swp,
    round_half_up,
)


def test_emi_zero_rate_is_straight_line() -> None:
    result = calculate_emi(120000, 0, 12)
    assert result.emi == 10000
    assert result.total_amount == 120000
    assert result.total_interest == 0
    assert result.principal == 120000


def test_emi_general_case() -> None:
    result = calculate_emi(100000, 10, 12)
    assert result.emi == 8792
    assert result.total_amount == 105499
    assert result.total_interest == 5499
    assert abs((result.total_amount - result.total_interest) - result.principal) <= 1


@pytest.mark.parametrize(
    "principal, rate, months",
    [(500000, 8.5, 240), (25000, 18, 6), (1000000, 7.25, 360)],
)
def test_emi_recovers_principal(principal, rate, months) -> None:
    result = calculate_emi(principal, rate, months)
    assert abs((result.total_amount - result.total_interest) - principal) <= 1
    assert result.total_interest > 0


def test_sip_zero_rate() -> None:
    result = calculate_sip(1000, 0, 1)
    assert result.future_value == 12000
    assert result.total_investment == 12000
    assert result.total_returns == 0


def test_sip_general_case() -> None:
    result = calculate_sip(1000, 12, 10)
    assert result.total_investment == 120000
    assert abs(result.future_value - 232339) <= 1
    assert abs(result.total_returns - (result.future_value - result.total_investment)) <= 1


def test_swp_runs_full_tenure_without_growth() -> None:
    result = calculate_swp(100000, 1000, 0, 1)
    assert result.total_withdrawn == 12000
    assert result.remaining_balance == 88000
    assert result.total_returns == 0
    assert result.initial_investment == 100000


def test_swp_stops_when_fund_exhausted() -> None:
    # 10000 -> 7000 -> 4000 -> 1000 -> на 4-й месяц забираем остаток
    result = calculate_swp(10000, 3000, 0, 1)
    assert result.total_withdrawn == 10000
    assert result.remaining_balance == 0
    assert result.total_returns == 0


def test_swp_withdrawal_above_balance_in_first_month() -> None:
    result = calculate_swp(1000, 5000, 12, 5)
    # 1000 * 1.01 = 1010 < 5000: один месяц и фонд пуст
    assert result.total_withdrawn == 1010
    assert result.remaining_balance == 0
    assert result.total_returns == 10


@pytest.mark.parametrize(
    "initial, withdrawal, rate, years",
    [
        (500000, 5000, 8, 10),
        (1000000, 12000, 10, 20),
        (250000, 40000, 6, 3),
        (100000, 100, 12, 1),
    ],
)
def test_swp_conservation(initial, withdrawal, rate, years) -> None:
    result = calculate_swp(initial, withdrawal, rate, years)
    assert result.total_withdrawn + result.remaining_balance - result.initial_investment == result.total_returns


def test_round_half_up_matches_browser_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(10.49) == 10
