# Coffee MCP Data Models

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, model_validator
from typing import Dict, Any, List, Optional, Union


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: Union[int, float]
    description: str


class ToolDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    inputSchema: Dict[str, Any]


class MCPRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: Union[StrictInt, StrictFloat]
    method: str
    params: Any = None


class MCPError(BaseModel):
    code: int
    message: str


class MCPResponse(BaseModel):
    """JSON-RPC 2.0 response; exactly one of result / error is set."""

    jsonrpc: str = "2.0"
    id: Union[int, float]
    result: Any = None
    error: Optional[MCPError] = None

    @model_validator(mode="after")
    def check_result_or_error(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of 'result' or 'error' must be set")
        return self


class ToolOutcome(BaseModel):
    """Outcome of a tool execution: a result or an error message."""

    result: Any = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class ServerInfo(BaseModel):
    name: str
    version: str
    description: Optional[str] = None


class ToolsCapability(BaseModel):
    listChanged: bool = True


class ServerCapabilities(BaseModel):
    tools: ToolsCapability = ToolsCapability()
    transport: Optional[str] = None


class InitializeResult(BaseModel):
    protocolVersion: str
    capabilities: ServerCapabilities
    serverInfo: ServerInfo


class ToolsListResult(BaseModel):
    tools: List[ToolDescription]
