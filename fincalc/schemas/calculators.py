from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmiOut(_CamelModel):
    emi: int
    total_amount: int
    total_interest: int
    principal: int


class SipOut(_CamelModel):
    future_value: int
    total_investment: int
    total_returns: int


class SwpOut(_CamelModel):
    total_withdrawn: int
    remaining_balance: int
    total_returns: int
    initial_investment: int


class EmiResponse(_CamelModel):
    success: bool = True
    result: EmiOut
    formatted: dict[str, str]


class SipResponse(_CamelModel):
    success: bool = True
    result: SipOut
    formatted: dict[str, str]


class SwpResponse(_CamelModel):
    success: bool = True
    result: SwpOut
    formatted: dict[str, str]
