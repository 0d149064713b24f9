"""orderpipe ビルダーパッケージ."""

from orderpipe.builder.base import AbstractPipeBuilder
from orderpipe.builder.order_builder import OrderBuilder
from orderpipe.builder.protocol import OrderStage, PipeBuilder, Stage
from orderpipe.builder.seasonal import SeasonalOrderBuilder

__all__ = [
    "AbstractPipeBuilder",
    "OrderBuilder",
    "OrderStage",
    "PipeBuilder",
    "SeasonalOrderBuilder",
    "Stage",
]
