"""
Coffee MCP - JSON-RPC リクエストディスパッチャ

One decoded request in, at most one response out. Requests whose envelope
is not JSON-RPC 2.0, or whose method is not recognized, produce no response.
"""

import logging
from typing import Any, Optional, Tuple
from pydantic import ValidationError

from config import MCP_CONFIG
from models import (
    InitializeResult,
    MCPError,
    MCPRequest,
    MCPResponse,
    ServerCapabilities,
    ServerInfo,
    ToolsListResult,
)
from tools_manager import execute_tool, tools_manager

logger = logging.getLogger(__name__)

INVALID_PARAMS = -32602
TOOL_ERROR = -32001

TOOL_METHODS = ("tools/execute", "tools/call")


def success(request_id, result: Any) -> MCPResponse:
    return MCPResponse(id=request_id, result=result)


def failure(request_id, code: int, message: str) -> MCPResponse:
    return MCPResponse(id=request_id, error=MCPError(code=code, message=message))


def extract_tool_call(params: Any) -> Tuple[Any, Any]:
    """tools/call パラメータから (ツール名, 引数) を取り出す

    Non-object params count as empty. The arguments bag is taken from
    ``arguments`` first, then ``parameters``, defaulting to ``{}``.
    """
    if not isinstance(params, dict):
        params = {}

    arguments = params.get("arguments")
    if arguments is None:
        arguments = params.get("parameters")
    if arguments is None:
        arguments = {}

    return params.get("name"), arguments


def handle_initialize(request: MCPRequest, transport: Optional[str]) -> MCPResponse:
    result = InitializeResult(
        protocolVersion=MCP_CONFIG["protocol_version"],
        capabilities=ServerCapabilities(transport=transport),
        serverInfo=ServerInfo(**MCP_CONFIG["server_info"]),
    )
    return success(request.id, result.model_dump(exclude_none=True))


def handle_tools_list(request: MCPRequest) -> MCPResponse:
    result = ToolsListResult(tools=tools_manager.get_tools_list())
    return success(request.id, result.model_dump())


def handle_tools_call(request: MCPRequest) -> MCPResponse:
    tool_name, arguments = extract_tool_call(request.params)
    logger.info(f"[handle_tools_call] Tool name: {tool_name!r}")
    logger.debug(f"[handle_tools_call] Arguments: {arguments!r}")

    if not isinstance(tool_name, str):
        return failure(request.id, INVALID_PARAMS, "Invalid params: 'name' must be a string.")

    outcome = execute_tool(tool_name, arguments)
    if outcome.is_error:
        logger.info(f"[handle_tools_call] Tool error: {outcome.error}")
        return failure(request.id, TOOL_ERROR, outcome.error)

    return success(request.id, {"result": outcome.result})


def process_request(request: Any, transport: Optional[str] = None) -> Optional[MCPResponse]:
    """1件のリクエストを処理してレスポンスを返す（応答不要なら None）"""
    if not isinstance(request, dict):
        logger.warning(f"[process_request] Dropping non-object request: {request!r}")
        return None

    if request.get("jsonrpc") != "2.0":
        return None

    try:
        envelope = MCPRequest.model_validate(request)
    except ValidationError as e:
        logger.warning(f"[process_request] Dropping invalid envelope: {e}")
        return None

    logger.info(f"[process_request] method={envelope.method} id={envelope.id}")

    if envelope.method == "initialize":
        return handle_initialize(envelope, transport)
    elif envelope.method == "tools/list":
        return handle_tools_list(envelope)
    elif envelope.method in TOOL_METHODS:
        return handle_tools_call(envelope)

    logger.debug(f"[process_request] Ignoring unknown method: {envelope.method}")
    return None
