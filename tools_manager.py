import os
import json
import logging
import importlib
from typing import Any, Callable, Dict, List, Optional
from models import ToolDescription, ToolOutcome

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tools", "tools_config.json")


class ToolsManager:
    """ツール定義の一元管理クラス"""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = json.load(f)
        self._tools = [
            ToolDescription(
                name=tool["name"],
                description=tool["description"],
                inputSchema={
                    "type": "object",
                    "properties": tool["parameters"],
                    "required": tool["required"]
                }
            )
            for tool in self.config["tools"]
        ]
        self._functions: Dict[str, Callable[[Any], ToolOutcome]] = {}

    def get_tools_list(self) -> List[ToolDescription]:
        """tools/list用のツール一覧（定義順）"""
        return list(self._tools)

    def get_tool_function(self, tool_name: str) -> Optional[Callable[[Any], ToolOutcome]]:
        """ツール名から関数を動的取得"""
        if tool_name in self._functions:
            return self._functions[tool_name]
        for tool in self.config["tools"]:
            if tool["name"] == tool_name:
                try:
                    module = importlib.import_module(tool["module_path"])
                    function = getattr(module, tool["function_name"])
                except (ImportError, AttributeError) as e:
                    logger.error(f"[ToolsManager] Failed to import {tool_name}: {e}")
                    return None
                self._functions[tool_name] = function
                return function
        return None

    def is_valid_tool(self, tool_name: Any) -> bool:
        """ツール名の有効性チェック"""
        return any(tool["name"] == tool_name for tool in self.config["tools"])

    def get_tool_names(self) -> List[str]:
        """全ツール名のリスト"""
        return [tool["name"] for tool in self.config["tools"]]

    def execute_tool(self, tool_name: Optional[str], params: Any) -> ToolOutcome:
        """ツール実行（未知のツールもエラー結果として返す）"""
        tool_function = self.get_tool_function(tool_name) if self.is_valid_tool(tool_name) else None
        if tool_function is None:
            shown = "undefined" if tool_name is None else tool_name
            return ToolOutcome(error=f"Unknown tool: {shown}")

        logger.debug(f"[ToolsManager] Calling {tool_name}")
        return tool_function(params)


tools_manager = ToolsManager()


def execute_tool(tool_name: Optional[str], params: Any) -> ToolOutcome:
    return tools_manager.execute_tool(tool_name, params)
