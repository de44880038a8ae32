# Coffee MCP Server Configuration

import os

# サーバー設定
SERVER_CONFIG = {
    "title": "Example MCP Coffee Server",
    "version": "1.0.0",
    "host": os.getenv("MCP_HOST", "0.0.0.0"),
    "port": int(os.getenv("MCP_PORT", "3000"))
}

# MCPプロトコル設定
MCP_CONFIG = {
    "protocol_version": "2025-03-26",
    "http_transport": "streamable-http",
    "server_info": {
        "name": "Example MCP Coffee Server",
        "version": "1.0.0",
        "description": "A simple coffee shop server"
    }
}

# ログ設定
LOG_CONFIG = {
    "level": os.getenv("MCP_LOG_LEVEL", "INFO"),
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s"
}
