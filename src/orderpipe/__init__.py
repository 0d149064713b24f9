"""orderpipe: Order を組み立てるビルダーとステージパイプライン."""

from orderpipe.builder import (
    AbstractPipeBuilder,
    OrderBuilder,
    OrderStage,
    PipeBuilder,
    SeasonalOrderBuilder,
    Stage,
)
from orderpipe.exceptions import OrderpipeError, OrderValidationError, StageError
from orderpipe.models import Address, Coupon, ProductLine
from orderpipe.order import Order, base_cost, compute_total_cost, create_order
from orderpipe.stages import (
    PROMO_ITEM,
    SEASONAL_PRICE_FACTOR,
    append_products,
    discount_products,
    drop_expired_coupons,
    promo_item,
    seasonal_offer,
)
from orderpipe.validation import validate_order

__all__ = [
    "PROMO_ITEM",
    "SEASONAL_PRICE_FACTOR",
    "AbstractPipeBuilder",
    "Address",
    "Coupon",
    "Order",
    "OrderBuilder",
    "OrderStage",
    "OrderValidationError",
    "OrderpipeError",
    "PipeBuilder",
    "ProductLine",
    "SeasonalOrderBuilder",
    "Stage",
    "StageError",
    "append_products",
    "base_cost",
    "compute_total_cost",
    "create_order",
    "discount_products",
    "drop_expired_coupons",
    "promo_item",
    "seasonal_offer",
    "validate_order",
]
