"""
Integration fixtures: a local JSON-RPC node served by aiohttp.
"""

import asyncio
from typing import AsyncGenerator, List

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeRpcNode:
    """
    Minimal RPC node answering broadcast_tx_commit.

    mode selects the answer: 'ok', 'error', 'garbage', 'http500', 'slow'.
    """

    def __init__(self):
        self.mode = "ok"
        self.url = ""
        self.requests: List[dict] = []

    async def handle(self, request: web.Request) -> web.Response:
        payload = await request.json()
        self.requests.append(payload)

        if self.mode == "http500":
            return web.Response(status=500, text="node down")
        if self.mode == "slow":
            await asyncio.sleep(2)
        if self.mode == "error":
            return web.json_response(
                {
                    "jsonrpc": "2.0",
                    "id": payload["id"],
                    "error": {"code": -32000, "message": "Server error"},
                }
            )
        if self.mode == "garbage":
            return web.json_response(
                {"jsonrpc": "2.0", "id": payload["id"], "result": {"status": {}}}
            )

        number = len(self.requests)
        return web.json_response(
            {
                "jsonrpc": "2.0",
                "id": payload["id"],
                "result": {
                    "status": {"SuccessValue": ""},
                    "transaction": {
                        "hash": f"tx-hash-{number}",
                        "signer_id": "alice.near",
                        "receiver_id": "bob.near",
                    },
                    "transaction_outcome": {},
                    "receipts_outcome": [],
                },
            }
        )


@pytest_asyncio.fixture
async def rpc_node() -> AsyncGenerator[FakeRpcNode, None]:
    node = FakeRpcNode()
    app = web.Application()
    app.router.add_post("/", node.handle)

    server = TestServer(app)
    await server.start_server()
    node.url = str(server.make_url("/"))

    yield node

    await server.close()
