"""
Customer Portal - Home Page Route
===================================

What:  Serves the HTML landing page at GET /.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from customer_portal.services.html_renderer import render_home
from customer_portal.store import customer_store

router = APIRouter(tags=["Home"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Customer portal landing page",
)
async def home() -> HTMLResponse:
    return HTMLResponse(content=render_home(customer_store.list_all()))
