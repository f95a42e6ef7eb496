from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the front end."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Presale progress ---

class PresaleDataResponse(CamelModel):
    """Current presale progress."""
    id: str
    total_raised: str
    total_supply: str
    current_rate: str
    stage_end_time: datetime
    is_active: bool
    updated_at: datetime
    percentage: str = Field(..., description="total_raised / total_supply x 100, two decimals")


# --- Token calculator ---

class CalculateRequest(CamelModel):
    """Payment amount to convert into tokens. Validated by the handler."""
    currency: Optional[str] = None
    pay_amount: Optional[Union[float, str]] = None

    @field_validator("pay_amount", mode="before")
    @classmethod
    def keep_booleans_unparsed(cls, value):
        # JSON true/false would otherwise coerce to 1.0/0.0
        if isinstance(value, bool):
            return str(value).lower()
        return value


class CalculateResponse(CamelModel):
    currency: str
    pay_amount: float
    usdt_value: float
    token_amount: float
    token_price: float
    rate: float


class CurrencyRateResponse(CamelModel):
    currency: str
    rate: float


class CurrenciesResponse(CamelModel):
    currencies: list[CurrencyRateResponse]
    token_price: float
    tokens_per_usdt: int


# --- Transactions ---

class TransactionCreateRequest(CamelModel):
    """Purchase submitted by the front end after the wallet pays."""
    wallet_address: Optional[str] = None
    currency: Optional[str] = None
    pay_amount: Optional[Decimal] = None
    receive_amount: Optional[Decimal] = None
    referral_code: Optional[str] = None


class TransactionResponse(CamelModel):
    id: str
    wallet_address: str
    currency: str
    pay_amount: str
    receive_amount: str
    tx_hash: Optional[str] = None
    status: str
    referral_code: Optional[str] = None
    created_at: datetime


class TransactionCreateResponse(CamelModel):
    success: bool
    transaction: TransactionResponse


class TransactionListResponse(CamelModel):
    transactions: list[TransactionResponse]
    total_tokens: str
    total_spent: str
    transaction_count: int
