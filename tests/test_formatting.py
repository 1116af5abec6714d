import pytest

from evm_mcp.rpc import RpcError
from evm_mcp.tools.formatting import error_text, format_response, rpc_tool


def test_format_scalar():
    assert format_response("Geth/v1.13.0", "Web3 Client Version") == "**Web3 Client Version**\n\nGeth/v1.13.0\n"


def test_format_flat_mapping_renders_json_literals():
    text = format_response({"is_listening": True, "missing": None, "count": 3}, "Status")
    assert text == "**Status**\n\n**is_listening:** true\n**missing:** null\n**count:** 3\n"


def test_format_nested_one_level_only():
    data = {"a": 1, "b": {"c": False, "d": {"e": 1}}, "logs": ["x", "y"]}
    text = format_response(data, "T")
    assert text == (
        "**T**\n\n"
        "**a:** 1\n"
        "**b:**\n"
        "  - c: false\n"
        "  - d: {'e': 1}\n"
        "\n"
        "**logs:**\n"
        "  - 0: x\n"
        "  - 1: y\n"
        "\n"
    )


def test_format_empty_nested_mapping():
    assert format_response({"filter": {}}, "Event Logs") == "**Event Logs**\n\n**filter:**\n\n"


def test_error_text_uses_message_or_class_name():
    assert error_text(RpcError("timeout")) == "Error: timeout"
    assert error_text(KeyError()) == "Error: KeyError"


@pytest.mark.asyncio
async def test_rpc_tool_converts_exceptions():
    @rpc_tool
    async def failing():
        raise RpcError("RPC call failed: boom")

    @rpc_tool
    async def working():
        return "ok"

    assert await failing() == "Error: RPC call failed: boom"
    assert await working() == "ok"
    assert failing.__name__ == "failing"
