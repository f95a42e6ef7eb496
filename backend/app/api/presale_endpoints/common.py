import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union

from app.core.constants import (
    EXCHANGE_RATES,
    INITIAL_CURRENT_RATE,
    INITIAL_STAGE_DURATION,
    INITIAL_TOTAL_RAISED,
    INITIAL_TOTAL_SUPPLY,
    TOKEN_PRICE_USDT,
)
from app.models.presale import PresaleData, Transaction
from app.schemas.presale import TransactionResponse

TWO_PLACES = Decimal("0.01")


def round_half_up(value: float, places: int = 2) -> float:
    """Round like JavaScript's toFixed rather than Python's banker's rounding."""
    quant = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP))


def parse_pay_amount(value: Union[float, str, None]) -> Optional[float]:
    """Return a positive finite amount, or None when the value is unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def get_exchange_rate(currency: str) -> Optional[float]:
    return EXCHANGE_RATES.get(currency)


def calculate_token_amount(pay_amount: float, rate: float) -> tuple[float, float]:
    """Convert a payment into (usdt_value, token_amount)."""
    usdt_value = pay_amount * rate
    token_amount = usdt_value / TOKEN_PRICE_USDT
    return usdt_value, token_amount


def calculate_percentage(total_raised: Decimal, total_supply: Decimal) -> str:
    """Share of the supply goal raised so far, as a two-decimal string."""
    if total_supply <= 0:
        return "0.00"
    percentage = Decimal(total_raised) / Decimal(total_supply) * 100
    return str(percentage.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def format_locale_number(value: Decimal) -> str:
    """Format with thousands separators and at most three fraction digits."""
    text = f"{value.quantize(Decimal('0.001'), rounding=ROUND_HALF_UP):,.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def quantize_decimal(value: Decimal, places: int) -> Decimal:
    """Round half-up to a column scale so every backend stores the same value."""
    return Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_decimal(value: Decimal, places: int) -> str:
    """Render a decimal column at its fixed scale, e.g. 2E+5 -> 200000.00."""
    return f"{quantize_decimal(value, places):.{places}f}"


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal(0))


async def get_or_create_presale_data() -> PresaleData:
    """Return the latest presale row, inserting the initial one if none exists."""
    presale = await PresaleData.all().order_by("-updated_at").first()
    if presale is not None:
        return presale

    return await PresaleData.create(
        total_raised=INITIAL_TOTAL_RAISED,
        total_supply=INITIAL_TOTAL_SUPPLY,
        current_rate=INITIAL_CURRENT_RATE,
        stage_end_time=datetime.now(timezone.utc) + INITIAL_STAGE_DURATION,
        is_active=True,
    )


def transaction_to_response(tx: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=str(tx.id),
        wallet_address=tx.wallet_address,
        currency=tx.currency,
        pay_amount=format_decimal(tx.pay_amount, 8),
        receive_amount=format_decimal(tx.receive_amount, 2),
        tx_hash=tx.tx_hash,
        status=tx.status.value,
        referral_code=tx.referral_code,
        created_at=tx.created_at,
    )
