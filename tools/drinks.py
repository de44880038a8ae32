# Coffee MCP - Drink Lookup Tools

import logging
from typing import Any, Mapping, Optional
from data import DRINKS
from models import Item, ToolOutcome

logger = logging.getLogger(__name__)

INVALID_GET_DRINK_PARAMS = "Invalid parameters for getDrink. 'name' must be a string."


def is_get_drink_params(params: Any) -> bool:
    """getDrink用パラメータ判定（name: str を持つオブジェクトか）"""
    return isinstance(params, Mapping) and isinstance(params.get("name"), str)


def find_drink(name: str) -> Optional[Item]:
    """商品名による検索（大文字小文字を区別しない、最初の一致を返す）"""
    name_lower = name.lower()
    return next((d for d in DRINKS if d.name.lower() == name_lower), None)


def get_drink_names(params: Any) -> ToolOutcome:
    """全ドリンク名の一覧"""
    return ToolOutcome(result=[d.name for d in DRINKS])


def get_drink_information(params: Any) -> ToolOutcome:
    """全ドリンクの詳細情報"""
    return ToolOutcome(result=[d.model_dump() for d in DRINKS])


def get_drink(params: Any) -> ToolOutcome:
    """名前指定でドリンクを1件取得"""
    if not is_get_drink_params(params):
        logger.info(f"[get_drink] Invalid params: {params!r}")
        return ToolOutcome(error=INVALID_GET_DRINK_PARAMS)

    drink = find_drink(params["name"])
    if drink is None:
        return ToolOutcome(error=f"Drink '{params['name']}' not found.")

    return ToolOutcome(result=drink.model_dump())
