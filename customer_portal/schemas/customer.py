"""
Customer Portal - Pydantic Response Schemas
=============================================

What:  Pydantic models defining the JSON contract of every API route.
How:   Route handlers return these models; FastAPI serializes them with the
       field names below, which existing consumers depend on verbatim.
"""

from typing import List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Model
# ══════════════════════════════════════════════════════════════════════════


class Customer(BaseModel):
    """
    A single customer record.

    Frozen: records are created once when the store is built and never
    modified afterwards.
    """
    id: int = Field(gt=0, description="Unique, stable customer identifier")
    name: str = Field(min_length=1, description="Company name")
    email: str = Field(description="Contact email (not validated as an address)")

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CustomerListResponse(BaseModel):
    """Returned by GET /api/customers."""
    success: bool = Field(default=True)
    count: int = Field(description="Number of customers in `data`")
    data: List[Customer]


class CustomerResponse(BaseModel):
    """Returned by GET /api/customers/{id}."""
    success: bool = Field(default=True)
    data: Customer


class ErrorResponse(BaseModel):
    """
    Error body for the customer lookup route.

    Example:
        {"success": false, "message": "Customer not found"}
    """
    success: bool = Field(default=False)
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    Liveness report returned by GET /api/health.

    The process has no dependencies to probe, so `status` is always "healthy"
    while the process can answer at all.
    """
    status: str = Field(default="healthy", description="Always 'healthy' when reachable")
    uptime: float = Field(ge=0, description="Seconds since the process started")
    timestamp: str = Field(description="Current UTC time, ISO 8601 with milliseconds")
    application: str = Field(default="customer-portal")
    environment: str = Field(description="Environment label from configuration")


class InfoResponse(BaseModel):
    """Static application metadata returned by GET /api/info."""
    name: str
    version: str
    developer: str
    description: str
    infrastructure: str
    module_used: str
    deployment: str
