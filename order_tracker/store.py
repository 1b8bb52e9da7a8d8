from fastapi import Depends, Request
from order_tracker.config import get_settings
from order_tracker.services.order_service import OrderService
from order_tracker.services.user_service import UserService


def get_sheets(request: Request):
    """Dependency for the spreadsheet client built at startup."""
    return request.app.state.sheets


def get_user_service(sheets=Depends(get_sheets)) -> UserService:
    return UserService(sheets, get_settings())


def get_order_service(sheets=Depends(get_sheets)) -> OrderService:
    return OrderService(sheets, get_settings())
