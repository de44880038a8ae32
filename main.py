#!/usr/bin/env python3
"""
Coffee MCP Server - ドリンク情報API
Port: 3000
"""

import argparse
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.responses import Response, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import LOG_CONFIG, MCP_CONFIG, SERVER_CONFIG
from tools_manager import tools_manager
from utils.framing import process_text

logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVER_CONFIG["title"],
    version=SERVER_CONFIG["version"],
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """POST / 以外はすべて 404"""
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return Response(status_code=exc.status_code)


@app.post("/")
async def mcp_endpoint(request: Request):
    """MCPプロトコルエンドポイント（改行区切りで複数リクエスト可）"""
    body = (await request.body()).decode("utf-8", errors="replace")
    logger.info(f"[mcp_endpoint] Request received: {len(body)} bytes")

    return StreamingResponse(
        process_text(body, MCP_CONFIG["http_transport"]),
        media_type="application/x-ndjson"
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=SERVER_CONFIG["title"])
    parser.add_argument("--transport", choices=["http", "stdio"], default="http")
    parser.add_argument("--host", default=SERVER_CONFIG["host"])
    parser.add_argument("--port", type=int, default=SERVER_CONFIG["port"])
    parser.add_argument("--log-level", default=LOG_CONFIG["level"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # ログ設定（標準出力はstdioトランスポートが使うため標準エラーへ）
    logging.basicConfig(level=args.log_level.upper(), format=LOG_CONFIG["format"], stream=sys.stderr)
    logger.info(f"Available tools: {', '.join(tools_manager.get_tool_names())}")

    if args.transport == "stdio":
        import asyncio
        from server.stdio_server import serve_stdio
        asyncio.run(serve_stdio())
        return

    import uvicorn
    logger.info(f"MCP Server is running on port {args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
