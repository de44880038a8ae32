"""
Coffee MCP Server - stdio transport

Each line of standard input is one JSON-RPC request; each response is
written as one line to standard output. Diagnostics go through logging
(standard error) and never reach standard output.
"""

import asyncio
import logging
import sys
from typing import AsyncIterator, BinaryIO, TextIO

from utils.framing import process_line

logger = logging.getLogger(__name__)


async def read_lines(input_stream: BinaryIO) -> AsyncIterator[str]:
    """入力ストリームから1行ずつ読み込む（EOFで終了、不正なバイト列は置換）"""
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, input_stream.readline)
        if not line:
            return
        yield line.decode("utf-8", errors="replace")


async def serve_stdio(input_stream: BinaryIO = None, output_stream: TextIO = None) -> None:
    """stdioトランスポートのメインループ（同時に処理するリクエストは常に1件）"""
    if input_stream is None:
        input_stream = sys.stdin.buffer
    if output_stream is None:
        output_stream = sys.stdout

    logger.info("[serve_stdio] MCP Server is running on stdio")
    async for line in read_lines(input_stream):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        encoded = process_line(line)
        if encoded is not None:
            output_stream.write(encoded)
            output_stream.flush()
    logger.info("[serve_stdio] Input closed, shutting down")
