# Coffee MCP - Line framing for JSON-RPC transports

import json
import logging
from typing import Any, Iterator, Optional

from dispatcher import process_request
from models import MCPResponse

logger = logging.getLogger(__name__)

# パース失敗時の戻り値（JSONの null と区別するため）
INVALID = object()


def split_lines(text: str) -> Iterator[str]:
    """改行区切りのテキストから空でない行を取り出す"""
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if line.strip():
            yield line


def decode_line(line: str) -> Any:
    try:
        return json.loads(line)
    except (ValueError, RecursionError) as e:
        logger.error(f"[decode_line] Failed to parse request line: {e}")
        return INVALID


def encode_response(response: MCPResponse) -> str:
    return response.model_dump_json(exclude_none=True) + "\n"


def process_line(line: str, transport: Optional[str] = None) -> Optional[str]:
    """1行分のリクエストを処理し、レスポンス行（または None）を返す"""
    request = decode_line(line)
    if request is INVALID:
        return None

    response = process_request(request, transport)
    if response is None:
        return None
    return encode_response(response)


def process_text(text: str, transport: Optional[str] = None) -> Iterator[str]:
    """複数行のリクエストを順に処理する（不正な行は後続の行に影響しない）"""
    for line in split_lines(text):
        encoded = process_line(line, transport)
        if encoded is not None:
            yield encoded
