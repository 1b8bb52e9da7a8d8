from order_tracker.models.user import User
from order_tracker.models.order import Order

__all__ = ["User", "Order"]
