"""
Order repository over the orders sheet.

Row mapping contract, one row per order:
    column 1  order_id
    column 2  status
    column 3  products, JSON-encoded list

The JSON encoding lives only in order_to_row / row_to_order.
"""

import asyncio
import json
import logging
import re

from order_tracker.config import Settings
from order_tracker.exceptions import InvalidProducts, OrderNotFound, StoreFailure
from order_tracker.models.order import Order

logger = logging.getLogger(__name__)

_CELL_RE = re.compile(r"^\$?(?P<col>[A-Za-z]{1,3})\$?(?P<row>\d*)(?::.*)?$")


def _column_index(letters: str) -> int:
    index = 0
    for ch in letters.upper():
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index


def _column_letters(index: int) -> str:
    letters = ""
    while index > 0:
        index, rem = divmod(index - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def status_cell(orders_range: str, row_index: int) -> str:
    """A1 address of the status cell for the zero-based row within orders_range."""
    sheet, sep, ref = orders_range.rpartition("!")
    match = _CELL_RE.match(ref)
    if match:
        column = _column_letters(_column_index(match.group("col")) + 1)
        start_row = int(match.group("row") or 1)
    elif not sep and ref:
        # A bare sheet name covers the whole sheet from A1
        sheet = ref if re.fullmatch(r"\w+", ref) else "'" + ref.replace("'", "''") + "'"
        column, start_row = "B", 1
    else:
        raise ValueError(f"Unsupported range: {orders_range}")
    cell = f"{column}{start_row + row_index}"
    return f"{sheet}!{cell}" if sheet else cell


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def order_to_row(order: Order) -> list[str]:
    try:
        products = json.dumps(
            order.products, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except ValueError as e:
        raise InvalidProducts() from e
    return [order.order_id, order.status, products]


def row_to_order(row: list) -> Order:
    order_id = row[0] if len(row) > 0 else ""
    status = row[1] if len(row) > 1 else ""
    raw = row[2] if len(row) > 2 and row[2] else "[]"
    try:
        products = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        logger.warning("Order %s has malformed products cell, using empty list", order_id)
        products = []
    if not isinstance(products, list):
        logger.warning("Order %s products cell is not a list, using empty list", order_id)
        products = []
    return Order(order_id=order_id, status=status, products=products)


class OrderService:
    def __init__(self, sheets, settings: Settings):
        self.sheets = sheets
        self.orders_range = settings.orders_range
        self.initial_status = settings.initial_order_status

    async def create(self, order_id: str, products: list) -> Order:
        """Append a new order. Duplicate ids are not checked."""
        order = Order(order_id=order_id, status=self.initial_status, products=products)
        row = order_to_row(order)
        try:
            await asyncio.to_thread(self.sheets.append_values, self.orders_range, [row])
        except StoreFailure as e:
            logger.exception("Could not create order %s", order_id)
            raise StoreFailure("Error creating order") from e
        logger.info("Created order %s with %d products", order_id, len(products))
        return order

    async def list_orders(self) -> list[Order]:
        """All orders in sheet order."""
        try:
            rows = await asyncio.to_thread(self.sheets.get_values, self.orders_range)
        except StoreFailure as e:
            logger.exception("Could not list orders")
            raise StoreFailure("Error listing orders") from e
        return [row_to_order(row) for row in rows]

    async def update_status(self, order_id: str, status: str) -> None:
        """Overwrite the status cell of the first row whose id matches exactly."""
        try:
            rows = await asyncio.to_thread(self.sheets.get_values, self.orders_range)
            index = next(
                (i for i, row in enumerate(rows) if len(row) > 0 and row[0] == order_id),
                None,
            )
            if index is None:
                raise OrderNotFound(order_id)
            cell = status_cell(self.orders_range, index)
            await asyncio.to_thread(self.sheets.update_values, cell, [[status]])
        except StoreFailure as e:
            logger.exception("Could not update order %s", order_id)
            raise StoreFailure("Error updating status") from e
        logger.info("Order %s status set to %r", order_id, status)
