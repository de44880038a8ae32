# Coffee MCP - Drink Data

from typing import Tuple
from models import Item

# 固定の商品データ（起動時にロード、以後読み取り専用）
DRINKS: Tuple[Item, ...] = (
    Item(name="Latte", price=5, description="A coffee drink with a lot of milk"),
    Item(name="Mocha", price=6, description="A coffee drink with a lot of chocolate"),
    Item(name="Cappuccino", price=7, description="A coffee drink with a lot of foam"),
    Item(name="Americano", price=8, description="A coffee drink with a lot of water"),
)
