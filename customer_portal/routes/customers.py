"""
Customer Portal - Customer Route Handlers
===========================================

What:  Handles GET /api/customers (list) and GET /api/customers/{id} (detail).
How:   Delegates to CustomerService; a missing customer surfaces as
       CustomerNotFoundError and is rendered by the global handler in main.py.
"""

import logging

from fastapi import APIRouter

from customer_portal.schemas.customer import (
    CustomerListResponse,
    CustomerResponse,
    ErrorResponse,
)
from customer_portal.services.customer_service import customer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Customers"])


@router.get(
    "/customers",
    response_model=CustomerListResponse,
    summary="List all customers",
    description="Returns every customer in insertion order together with the count.",
)
async def list_customers() -> CustomerListResponse:
    return customer_service.list_customers()


@router.get(
    "/customers/{customer_id}",
    response_model=CustomerResponse,
    responses={
        200: {"description": "Customer found", "model": CustomerResponse},
        404: {"description": "Customer not found", "model": ErrorResponse},
    },
    summary="Get a single customer by ID",
    description=(
        "Looks up a customer by integer id. The id is parsed permissively "
        "(leading digits only); ids that do not parse and ids that match no "
        "customer both return 404."
    ),
)
async def get_customer(customer_id: str) -> CustomerResponse:
    """
    Args:
        customer_id: Raw path segment. Typed as `str` so that a
                     non-numeric id reaches the service and becomes a 404
                     instead of FastAPI's 422.
    """
    return customer_service.get_customer(customer_id)
