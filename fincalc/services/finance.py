"""Калькуляторы EMI / SIP / SWP.

Чистые функции без валидации: вход (положительные числа, ставка >= 0)
проверяет вызывающий код. Каждое денежное поле округляется отдельно,
из неокруглённых промежуточных значений.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class EmiResult:
    emi: int
    total_amount: int
    total_interest: int
    principal: int


@dataclass(frozen=True)
class SipResult:
    future_value: int
    total_investment: int
    total_returns: int


@dataclass(frozen=True)
class SwpResult:
    total_withdrawn: int
    remaining_balance: int
    total_returns: int
    initial_investment: int


def round_half_up(value: float) -> int:
    # как Math.round в браузере: .5 всегда вверх (round() в python — банковское)
    return int(math.floor(value + 0.5))


def _monthly_rate(annual_percent: float) -> float:
    return annual_percent / 12 / 100


def calculate_emi(principal: float, annual_rate: float, tenure_months: float) -> EmiResult:
    """Аннуитетный платёж по кредиту."""
    r = _monthly_rate(annual_rate)

    if r == 0:
        # без процентов — просто делим тело на срок
        return EmiResult(
            emi=round_half_up(principal / tenure_months),
            total_amount=round_half_up(principal),
            total_interest=0,
            principal=round_half_up(principal),
        )

    growth = (1 + r) ** tenure_months
    emi = principal * r * growth / (growth - 1)
    total_amount = emi * tenure_months
    total_interest = total_amount - principal

    return EmiResult(
        emi=round_half_up(emi),
        total_amount=round_half_up(total_amount),
        total_interest=round_half_up(total_interest),
        principal=round_half_up(principal),
    )


def calculate_sip(monthly_investment: float, annual_return: float, tenure_years: float) -> SipResult:
    """Будущая стоимость ежемесячных взносов (взнос в начале месяца)."""
    r = _monthly_rate(annual_return)
    months = tenure_years * 12
    total_investment = monthly_investment * months

    if r == 0:
        return SipResult(
            future_value=round_half_up(total_investment),
            total_investment=round_half_up(total_investment),
            total_returns=0,
        )

    future_value = monthly_investment * ((1 + r) ** months - 1) / r * (1 + r)
    total_returns = future_value - total_investment

    return SipResult(
        future_value=round_half_up(future_value),
        total_investment=round_half_up(total_investment),
        total_returns=round_half_up(total_returns),
    )


def calculate_swp(
    initial_investment: float,
    monthly_withdrawal: float,
    annual_return: float,
    tenure_years: float,
) -> SwpResult:
    """Помесячная симуляция вывода средств.

    Каждый месяц: сначала начисляем доходность, потом снимаем. Если на
    счёте меньше, чем нужно снять, забираем остаток и останавливаемся.
    """
    r = _monthly_rate(annual_return)
    months = math.floor(tenure_years * 12)

    balance = float(initial_investment)
    total_withdrawn = 0.0

    for _ in range(months):
        balance *= 1 + r

        if balance >= monthly_withdrawal:
            balance -= monthly_withdrawal
            total_withdrawn += monthly_withdrawal
        else:
            total_withdrawn += balance
            balance = 0.0
            break

    total_returns = (total_withdrawn + balance) - initial_investment

    return SwpResult(
        total_withdrawn=round_half_up(total_withdrawn),
        remaining_balance=round_half_up(balance),
        total_returns=round_half_up(total_returns),
        initial_investment=round_half_up(initial_investment),
    )
