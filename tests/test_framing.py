import json
import logging
import pytest

from dispatcher import process_request
from utils.framing import INVALID, decode_line, encode_response, process_line, process_text, split_lines


def line(message):
    return json.dumps(message)


def test_split_lines_skips_blank_lines():
    text = '{"a": 1}\r\n\n   \n{"b": 2}\n'
    assert list(split_lines(text)) == ['{"a": 1}', '{"b": 2}']


def test_decode_line_logs_parse_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="utils.framing"):
        assert decode_line("not a valid json") is INVALID
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.ERROR


def test_decode_line_keeps_null_distinct():
    assert decode_line("null") is None


def test_encode_response_is_one_compact_line():
    response = process_request({"jsonrpc": "2.0", "id": 1, "method": "tools/call",
                                "params": {"name": "getDrinkNames"}})
    encoded = encode_response(response)
    assert encoded == '{"jsonrpc":"2.0","id":1,"result":{"result":["Latte","Mocha","Cappuccino","Americano"]}}\n'


def test_process_line_invalid_json_produces_nothing(caplog):
    with caplog.at_level(logging.ERROR):
        assert process_line("not a valid json") is None
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_process_line_wrong_version_produces_nothing():
    assert process_line(line({"jsonrpc": "1.0", "id": 6, "method": "initialize"})) is None


def test_bad_line_does_not_stop_batch(caplog):
    text = "\n".join([
        line({"jsonrpc": "2.0", "id": 1, "method": "tools/list"}),
        "{broken",
        line({"jsonrpc": "1.0", "id": 2, "method": "tools/list"}),
        line({"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "getDrink", "arguments": {"name": "mocha"}}}),
    ])
    with caplog.at_level(logging.ERROR, logger="utils.framing"):
        output = list(process_text(text))

    assert [json.loads(o)["id"] for o in output] == [1, 3]
    assert all(o.endswith("\n") and o.count("\n") == 1 for o in output)
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


@pytest.mark.parametrize("message", [
    {"jsonrpc": "2.0", "id": 1, "method": "initialize"},
    {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
    {"jsonrpc": "2.0", "id": 3, "method": "tools/execute", "params": {"name": "getDrinkInformation"}},
    {"jsonrpc": "2.0", "id": 4, "method": "tools/call", "params": {"name": "getDrink", "arguments": {}}},
    {"jsonrpc": "2.0", "id": 5, "method": "tools/call", "params": {"name": "nope"}},
    {"jsonrpc": "2.0", "id": 6, "method": "tools/call", "params": {}},
])
def test_responses_parse_back_to_valid_envelopes(message):
    parsed = json.loads(process_line(line(message), "streamable-http"))
    assert parsed["jsonrpc"] == "2.0"
    assert parsed["id"] == message["id"]
    assert ("result" in parsed) != ("error" in parsed)
    if "error" in parsed:
        assert set(parsed["error"]) == {"code", "message"}


def test_deeply_nested_line_is_logged_and_skipped(caplog):
    text = "[" * 100000 + "\n" + line({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    with caplog.at_level(logging.ERROR, logger="utils.framing"):
        output = list(process_text(text))

    assert [json.loads(o)["id"] for o in output] == [1]
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_replacement_characters_are_a_parse_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="utils.framing"):
        assert process_line(b"\xff\xfe bad".decode("utf-8", errors="replace")) is None
    assert len(caplog.records) == 1
