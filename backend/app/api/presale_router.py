from fastapi import APIRouter

from app.api.presale_endpoints.calculate import router as calculate_router
from app.api.presale_endpoints.progress import router as progress_router
from app.api.presale_endpoints.transactions import router as transactions_router

router = APIRouter()

router.include_router(progress_router, prefix="/presale", tags=["presale"])
router.include_router(calculate_router, prefix="/presale", tags=["presale"])
router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
# Path the first deployment of the site was served under
router.include_router(
    transactions_router,
    prefix="/transcations",
    tags=["transactions"],
    include_in_schema=False,
)
