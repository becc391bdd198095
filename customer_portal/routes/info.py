"""
Customer Portal - Application Info Route
==========================================

What:  GET /api/info returns fixed application metadata.
How:   Every value is a literal; the response depends on neither the record
       store nor the configuration, so repeated calls are identical.
"""

from fastapi import APIRouter

from customer_portal import __version__
from customer_portal.schemas.customer import InfoResponse

router = APIRouter(prefix="/api", tags=["Info"])

APP_INFO = InfoResponse(
    name="Customer Portal",
    version=__version__,
    developer="Application Team",
    description="Simple customer management portal deployed with no-code Terraform modules",
    infrastructure="Managed by Platform Team",
    module_used="webserver v1.0.0",
    deployment="HCP Terraform + Private Registry",
)


@router.get(
    "/info",
    response_model=InfoResponse,
    summary="Static application metadata",
)
async def app_info() -> InfoResponse:
    return APP_INFO
