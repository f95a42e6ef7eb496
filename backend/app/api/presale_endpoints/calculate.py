import logging
import math

from fastapi import APIRouter, HTTPException, status

from app.core.constants import EXCHANGE_RATES, TOKEN_PRICE_USDT, TOKENS_PER_USDT
from app.schemas.presale import (
    CalculateRequest,
    CalculateResponse,
    CurrenciesResponse,
    CurrencyRateResponse,
)

from .common import (
    calculate_token_amount,
    get_exchange_rate,
    parse_pay_amount,
    round_half_up,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    summary="Convert a payment into tokens",
    description="Converts a payment amount to its USDT value and token amount using fixed rates.",
)
async def calculate(request: CalculateRequest) -> CalculateResponse:
    pay_amount = parse_pay_amount(request.pay_amount)
    if not request.currency or pay_amount is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid currency or amount",
        )

    rate = get_exchange_rate(request.currency)
    if rate is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unsupported currency",
        )

    try:
        usdt_value, token_amount = calculate_token_amount(pay_amount, rate)
        if not (math.isfinite(usdt_value) and math.isfinite(token_amount)):
            raise ValueError(f"non-finite result for {pay_amount} {request.currency}")

        result = CalculateResponse(
            currency=request.currency,
            pay_amount=pay_amount,
            usdt_value=round_half_up(usdt_value),
            token_amount=round_half_up(token_amount),
            token_price=TOKEN_PRICE_USDT,
            rate=rate,
        )
    except ValueError as e:
        logger.warning(f"Invalid calculation: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid calculation result",
        )
    except Exception as e:
        logger.exception(f"Calculation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Calculation failed",
        )

    return result


@router.get(
    "/currencies",
    response_model=CurrenciesResponse,
    summary="Get supported payment currencies",
)
async def get_currencies() -> CurrenciesResponse:
    """List the currencies accepted by the calculator with their fixed rates."""
    return CurrenciesResponse(
        currencies=[
            CurrencyRateResponse(currency=code, rate=rate)
            for code, rate in EXCHANGE_RATES.items()
        ],
        token_price=TOKEN_PRICE_USDT,
        tokens_per_usdt=TOKENS_PER_USDT,
    )
