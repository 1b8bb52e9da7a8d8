from dataclasses import dataclass, field


@dataclass
class Order:
    """One row of the orders sheet: order_id | status | products (JSON text)."""
    order_id: str
    status: str
    products: list = field(default_factory=list)
