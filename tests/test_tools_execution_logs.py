import pytest

from evm_mcp.tools.execution import eth_call, eth_estimate_gas, eth_gas_price
from evm_mcp.tools.logs import eth_get_logs

TOKEN = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
CALLDATA = "0x18160ddd"


@pytest.mark.asyncio
async def test_eth_call_minimal_transaction(stub_client):
    result = "0x" + "0" * 56 + "3b9aca00"
    client = stub_client(result=result)
    text = await eth_call(TOKEN, CALLDATA, client=client)
    assert client.calls == [("eth_call", [{"to": TOKEN, "data": CALLDATA}, "latest"])]
    assert "**Contract Call Result**" in text
    assert f"**result:** {result}" in text
    assert f"**to:** {TOKEN}" in text
    assert f"**data:** {CALLDATA}" in text
    assert "**block:** latest" in text


@pytest.mark.asyncio
async def test_eth_call_includes_supplied_optional_fields(stub_client):
    client = stub_client(result="0x")
    await eth_call(TOKEN, CALLDATA, "0x10", from_address="0xabc", gas="0x5208", client=client)
    method, params = client.calls[0]
    assert method == "eth_call"
    assert params == [{"to": TOKEN, "data": CALLDATA, "from": "0xabc", "gas": "0x5208"}, "0x10"]


@pytest.mark.asyncio
async def test_eth_estimate_gas_omits_unsupplied_fields(stub_client):
    client = stub_client(result="0x5208")
    text = await eth_estimate_gas(to=TOKEN, client=client)
    assert client.calls == [("eth_estimateGas", [{"to": TOKEN}])]
    assert "**gas_estimate_hex:** 0x5208" in text
    assert "**gas_estimate_decimal:** 21000" in text
    assert f"**transaction_object:**\n  - to: {TOKEN}\n" in text


@pytest.mark.asyncio
async def test_eth_estimate_gas_empty_strings_are_omitted(stub_client):
    client = stub_client(result="0x5208")
    await eth_estimate_gas(to=TOKEN, data="", from_address="", value="0xde0b6b3a7640000", client=client)
    assert client.calls == [("eth_estimateGas", [{"to": TOKEN, "value": "0xde0b6b3a7640000"}])]


@pytest.mark.asyncio
async def test_eth_gas_price_wei_and_gwei(stub_client):
    client = stub_client(result="0x4a817c800")
    text = await eth_gas_price(client=client)
    assert client.calls == [("eth_gasPrice", None)]
    assert "**gas_price_hex:** 0x4a817c800" in text
    assert "**gas_price_wei:** 20000000000" in text
    assert "**gas_price_gwei:** 20.0" in text


@pytest.mark.asyncio
async def test_eth_get_logs_with_filter(stub_client):
    logs = [
        {"address": TOKEN, "blockNumber": "0x10", "data": "0x"},
        {"address": TOKEN, "blockNumber": "0x11", "data": "0x"},
    ]
    client = stub_client(result=logs)
    text = await eth_get_logs(
        from_block="0x10",
        to_block="latest",
        address=TOKEN,
        topics=["0xddf252ad"],
        client=client,
    )
    assert client.calls == [
        (
            "eth_getLogs",
            [{"fromBlock": "0x10", "toBlock": "latest", "address": TOKEN, "topics": ["0xddf252ad"]}],
        )
    ]
    assert "**logs_count:** 2" in text
    assert "**logs:**\n  - 0: " in text
    assert "**filter:**\n  - fromBlock: 0x10\n" in text


@pytest.mark.asyncio
async def test_eth_get_logs_empty_filter(stub_client):
    client = stub_client(result=[])
    text = await eth_get_logs(client=client)
    assert client.calls == [("eth_getLogs", [{}])]
    assert "**logs_count:** 0" in text
