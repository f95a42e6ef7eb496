import logging

from fastapi import APIRouter, HTTPException, status

from app.schemas.presale import PresaleDataResponse

from .common import calculate_percentage, format_decimal, get_or_create_presale_data

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=PresaleDataResponse,
    summary="Get presale progress",
    description="Returns the latest presale snapshot, initializing it on first access.",
)
async def get_presale_data() -> PresaleDataResponse:
    """Fetch the current presale progress and the percentage of the goal raised."""
    try:
        presale = await get_or_create_presale_data()
        return PresaleDataResponse(
            id=str(presale.id),
            total_raised=format_decimal(presale.total_raised, 2),
            total_supply=format_decimal(presale.total_supply, 2),
            current_rate=format_decimal(presale.current_rate, 8),
            stage_end_time=presale.stage_end_time,
            is_active=presale.is_active,
            updated_at=presale.updated_at,
            percentage=calculate_percentage(presale.total_raised, presale.total_supply),
        )
    except Exception as e:
        logger.exception(f"Presale API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Failed to fetch presale data", "error": str(e)},
        )
