import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from app.models.presale import Transaction
from app.schemas.presale import (
    TransactionCreateRequest,
    TransactionCreateResponse,
    TransactionListResponse,
)

from .common import (
    format_decimal,
    format_locale_number,
    quantize_decimal,
    sum_decimals,
    transaction_to_response,
)

logger = logging.getLogger(__name__)
router = APIRouter()

FAILURE_DETAIL = "Failed to process transaction request"


@router.post(
    "",
    response_model=TransactionCreateResponse,
    summary="Record a purchase",
)
async def create_transaction(request: TransactionCreateRequest) -> TransactionCreateResponse:
    """Store a purchase for a wallet with status pending."""
    wallet_address = (request.wallet_address or "").strip()
    if (
        not wallet_address
        or not request.currency
        or not request.pay_amount
        or not request.receive_amount
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields",
        )

    try:
        tx = await Transaction.create(
            wallet_address=wallet_address,
            currency=request.currency,
            pay_amount=quantize_decimal(request.pay_amount, 8),
            receive_amount=quantize_decimal(request.receive_amount, 2),
            referral_code=request.referral_code or None,
        )
    except Exception as e:
        logger.exception(f"Transaction API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=FAILURE_DETAIL,
        )

    logger.info(f"Recorded transaction {tx.id} for {wallet_address}")
    return TransactionCreateResponse(success=True, transaction=transaction_to_response(tx))


@router.get(
    "",
    response_model=TransactionListResponse,
    summary="Get transactions for a wallet",
)
async def list_transactions(address: Optional[str] = None) -> TransactionListResponse:
    """List a wallet's purchases oldest first, with token and spend totals."""
    address = (address or "").strip()
    if not address:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wallet address required",
        )

    try:
        transactions = await Transaction.filter(wallet_address=address).order_by("created_at")
    except Exception as e:
        logger.exception(f"Transaction API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=FAILURE_DETAIL,
        )

    total_tokens = sum_decimals(tx.receive_amount for tx in transactions)
    total_spent = sum_decimals(tx.pay_amount for tx in transactions)

    return TransactionListResponse(
        transactions=[transaction_to_response(tx) for tx in transactions],
        total_tokens=format_locale_number(total_tokens),
        total_spent=format_decimal(total_spent, 4),
        transaction_count=len(transactions),
    )
