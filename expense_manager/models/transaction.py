from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str
    name: str


class TransactionCreate(BaseModel):
    kind: TransactionKind
    amount: float = Field(ge=0, allow_inf_nan=False)
    category: str
    description: str
    date: Optional[datetime] = None  # falls back to the session's selected month

    @field_validator("category", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def category_matches_kind(self):
        from expense_manager.core.reference import categories_for

        allowed = categories_for(self.kind)
        if self.category not in allowed:
            raise ValueError(
                f"category '{self.category}' is not valid for {self.kind.value}; "
                f"expected one of {', '.join(allowed)}"
            )
        return self


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    kind: TransactionKind
    amount: float = Field(ge=0, allow_inf_nan=False)
    category: str
    description: str = ""
    date: datetime = Field(default_factory=datetime.now)
