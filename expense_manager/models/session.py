from pydantic import BaseModel, field_validator

from expense_manager.models.transaction import Currency


class UserNameUpdate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class CurrencyUpdate(BaseModel):
    code: str


class MonthUpdate(BaseModel):
    month: str  # YYYY-MM


class SessionPublic(BaseModel):
    user_name: str
    currency: Currency
    selected_month: str
    period: str
    phase: str
    transaction_count: int
