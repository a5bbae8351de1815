"""
Shared fixtures: an in-process fake Zabbix API served through httpx.MockTransport
"""
import json

import httpx
import pytest

from zabbix_rpc import ZabbixAPI

API_URL = "http://zabbix.example.com/api_jsonrpc.php"


class FakeZabbix:
    """Answers JSON-RPC requests and records every request it sees"""

    def __init__(self, version="2.4.0", token="0424bd59b807674191e7d77572075f33"):
        self.version = version
        self.token = token
        self.requests = []
        self.results = {}
        self.errors = {}

    @property
    def methods(self):
        return [request["method"] for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        method = body["method"]
        reply = {"jsonrpc": "2.0", "id": body["id"]}

        if method in self.errors:
            reply["error"] = self.errors[method]
        elif method in self.results:
            reply["result"] = self.results[method]
        elif method == "APIInfo.version":
            reply["result"] = self.version
        elif method in ("user.login", "user.authenticate"):
            reply["result"] = self.token
        else:
            reply["error"] = {"code": -32602, "message": "Invalid params.", "data": f"Unknown method {method}."}
        return httpx.Response(200, json=reply)


@pytest.fixture
def fake_zabbix():
    return FakeZabbix()


@pytest.fixture
def api(fake_zabbix):
    client = httpx.Client(transport=httpx.MockTransport(fake_zabbix.handler))
    api = ZabbixAPI(API_URL, client=client)
    yield api
    api.close()
