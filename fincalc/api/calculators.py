from dataclasses import asdict

from fastapi import APIRouter, Query
from pydantic.alias_generators import to_camel

from fincalc.schemas.calculators import EmiResponse, SipResponse, SwpResponse
from fincalc.services.finance import calculate_emi, calculate_sip, calculate_swp
from fincalc.services.formatting import format_currency, format_percentage


router = APIRouter(prefix="/api/calculators", tags=["calculators"])


# верхние границы: (1+r)**n не переполняется, цикл SWP не длиннее 1200 месяцев
MAX_AMOUNT = 1e12
MAX_RATE = 100
MAX_TENURE_MONTHS = 600
MAX_TENURE_YEARS = 100


def _amount():
    return Query(..., gt=0, le=MAX_AMOUNT, allow_inf_nan=False)


def _rate():
    return Query(..., ge=0, le=MAX_RATE, allow_inf_nan=False)


def _years():
    return Query(..., gt=0, le=MAX_TENURE_YEARS, allow_inf_nan=False)


def _formatted(result, rate: float) -> dict[str, str]:
    # те же ключи, что в result, но строкой в рупиях; плюс ставка в процентах
    out = {to_camel(k): format_currency(v) for k, v in asdict(result).items()}
    out["rate"] = format_percentage(rate)
    return out


@router.get("/emi", response_model=EmiResponse)
async def emi(
    principal: float = _amount(),
    annual_rate: float = _rate(),
    tenure_months: int = Query(..., gt=0, le=MAX_TENURE_MONTHS),
):
    result = calculate_emi(principal, annual_rate, tenure_months)
    return EmiResponse(result=asdict(result), formatted=_formatted(result, annual_rate))


@router.get("/sip", response_model=SipResponse)
async def sip(
    monthly_investment: float = _amount(),
    annual_return: float = _rate(),
    tenure_years: float = _years(),
):
    result = calculate_sip(monthly_investment, annual_return, tenure_years)
    return SipResponse(result=asdict(result), formatted=_formatted(result, annual_return))


@router.get("/swp", response_model=SwpResponse)
async def swp(
    initial_investment: float = _amount(),
    monthly_withdrawal: float = _amount(),
    annual_return: float = _rate(),
    tenure_years: float = _years(),
):
    result = calculate_swp(initial_investment, monthly_withdrawal, annual_return, tenure_years)
    return SwpResponse(result=asdict(result), formatted=_formatted(result, annual_return))
