"""Sales report over delivered orders.

Only orders in the ``Delivered`` status count. An order belongs to the report
when its creation time falls between the start of ``start_date`` and the end
of ``end_date``, both days included. Revenue is summed from the prices
captured on each order line; flowers are named by their current catalogue
name, or "Unknown" once they have been deleted.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from decimal import Decimal

from flowershop.order.errors import InvalidReportRange
from flowershop.shared.money import line_total, to_amount, to_decimal
from flowershop.shared.results import Failure, Result, Success
from flowershop.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_FLOWER = "Unknown"


@dataclass(frozen=True)
class FlowerSales:
    flower_id: str
    flower_name: str
    quantity_sold: int
    revenue: float


@dataclass(frozen=True)
class DailySales:
    day: date
    orders_count: int
    revenue: float


@dataclass(frozen=True)
class SalesReport:
    start_date: date
    end_date: date
    total_revenue: float
    total_orders: int
    total_items_sold: int
    top_flowers: list[FlowerSales] = field(default_factory=list)
    daily_sales: list[DailySales] = field(default_factory=list)


def report_window(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    return (
        datetime.combine(start_date, time.min, tzinfo=UTC),
        datetime.combine(end_date, time.max, tzinfo=UTC),
    )


class SalesReportHandler:
    """Builds a ``SalesReport`` from the order and flower repositories it is given."""

    def __init__(self, orders, flowers, top_n: int = 10):
        self.orders = orders
        self.flowers = flowers
        self.top_n = top_n

    def generate(self, start_date: date, end_date: date) -> Result:
        if end_date < start_date:
            return Failure(InvalidReportRange(start_date=start_date, end_date=end_date))

        start, end = report_window(start_date, end_date)
        orders = self.orders.delivered_between(start, end)

        quantities = defaultdict(int)
        revenues = defaultdict(Decimal)
        daily_counts = defaultdict(int)
        daily_revenue = defaultdict(Decimal)
        total_revenue = Decimal("0")
        total_items = 0

        for order in orders:
            order_total = to_decimal(order.total_amount)
            total_revenue += order_total

            day = order.created_at.date()
            daily_counts[day] += 1
            daily_revenue[day] += order_total

            for item in order.items:
                flower_id = str(item.flower_id)
                quantities[flower_id] += item.quantity
                revenues[flower_id] += line_total(item.price, item.quantity)
                total_items += item.quantity

        names = {flower.id: flower.name for flower in self.flowers.get_by_ids(list(quantities))}
        top_flowers = sorted(
            (
                FlowerSales(
                    flower_id=flower_id,
                    flower_name=names.get(flower_id) or UNKNOWN_FLOWER,
                    quantity_sold=quantities[flower_id],
                    revenue=to_amount(revenues[flower_id]),
                )
                for flower_id in quantities
            ),
            key=lambda sales: (-sales.revenue, sales.flower_name),
        )[: self.top_n]

        daily_sales = [
            DailySales(day=day, orders_count=daily_counts[day], revenue=to_amount(daily_revenue[day]))
            for day in sorted(daily_counts)
        ]

        logger.debug("sales_report_generated", start_date=str(start_date), end_date=str(end_date), orders=len(orders))
        return Success(
            SalesReport(
                start_date=start_date,
                end_date=end_date,
                total_revenue=to_amount(total_revenue),
                total_orders=len(orders),
                total_items_sold=total_items,
                top_flowers=top_flowers,
                daily_sales=daily_sales,
            )
        )
