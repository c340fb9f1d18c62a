"""
Remote Store Component Tests

RemoteStoreClient against a mocked HTTP client, plus one pass through a
real httpx client with a mock transport.
"""
import json

import httpx
import pytest

from inventory_flow.models import InventoryData
from inventory_flow.protocols import RemoteNetworkError, RemoteParseError, RemoteStoreProtocol
from inventory_flow.remote_store import RemoteStoreClient

from tests.fixtures import REMOTE_ENDPOINT, make_inventory, make_product_record


@pytest.fixture
def remote_client(mock_http_client):
    return RemoteStoreClient(REMOTE_ENDPOINT, client=mock_http_client)


@pytest.mark.component
@pytest.mark.asyncio
class TestReadRemote:
    """Test GET <endpoint>"""

    async def test_read_success(self, remote_client, mock_http_client):
        records = [make_product_record(name="Shirt"), make_product_record(name="Jeans", category="bottoms")]
        mock_http_client.set_response("GET", REMOTE_ENDPOINT, 200, json_data=records)

        data = await remote_client.read_remote()

        assert [p.name for p in data.products] == ["Shirt", "Jeans"]
        assert data.to_records() == records
        assert mock_http_client.get_requests("GET")[0]["url"] == REMOTE_ENDPOINT

    async def test_read_empty_list(self, remote_client, mock_http_client):
        mock_http_client.set_response("GET", REMOTE_ENDPOINT, 200, json_data=[])
        assert await remote_client.read_remote() == InventoryData.empty()

    @pytest.mark.parametrize("status_code", [301, 404, 500, 503])
    async def test_read_non_2xx_is_network_error(self, remote_client, mock_http_client, status_code):
        mock_http_client.set_response("GET", REMOTE_ENDPOINT, status_code, json_data=[])

        with pytest.raises(RemoteNetworkError) as exc_info:
            await remote_client.read_remote()

        assert exc_info.value.status_code == status_code

    async def test_read_transport_error(self, remote_client, mock_http_client):
        mock_http_client.set_error(httpx.ConnectError("connection refused"))
        with pytest.raises(RemoteNetworkError):
            await remote_client.read_remote()

    async def test_read_invalid_json_is_parse_error(self, remote_client, mock_http_client):
        mock_http_client.set_response("GET", REMOTE_ENDPOINT, 200, text="<html>", invalid_json=True)
        with pytest.raises(RemoteParseError):
            await remote_client.read_remote()

    @pytest.mark.parametrize("payload", [{"products": []}, [{"id": "p1"}], "nope"])
    async def test_read_wrong_shape_is_parse_error(self, remote_client, mock_http_client, payload):
        mock_http_client.set_response("GET", REMOTE_ENDPOINT, 200, json_data=payload)
        with pytest.raises(RemoteParseError):
            await remote_client.read_remote()


@pytest.mark.component
@pytest.mark.asyncio
class TestWriteRemote:
    """Test POST <endpoint>"""

    async def test_write_posts_json_array(self, remote_client, mock_http_client):
        data = make_inventory(product_count=2)
        mock_http_client.set_response("POST", REMOTE_ENDPOINT, 200, json_data={"status": "ok"})

        assert await remote_client.write_remote(data) is True

        request = mock_http_client.get_requests("POST")[0]
        assert request["url"] == REMOTE_ENDPOINT
        assert json.loads(request["content"]) == data.to_records()

    async def test_write_non_2xx_fails(self, remote_client, mock_http_client):
        mock_http_client.set_response("POST", REMOTE_ENDPOINT, 500, json_data={"error": "boom"})
        assert await remote_client.write_remote(make_inventory()) is False

    async def test_write_transport_error_fails(self, remote_client, mock_http_client):
        mock_http_client.set_error(httpx.ReadTimeout("timed out"))
        assert await remote_client.write_remote(make_inventory()) is False

    async def test_write_does_not_retry(self, remote_client, mock_http_client):
        mock_http_client.set_response("POST", REMOTE_ENDPOINT, 500)
        await remote_client.write_remote(make_inventory())
        assert len(mock_http_client.get_requests("POST")) == 1


@pytest.mark.component
@pytest.mark.asyncio
class TestRemoteClientLifecycle:
    """Test construction and close"""

    async def test_requires_endpoint(self):
        with pytest.raises(ValueError):
            RemoteStoreClient("  ")

    async def test_injected_client_not_closed(self, mock_http_client):
        async with RemoteStoreClient(REMOTE_ENDPOINT, client=mock_http_client):
            pass
        assert mock_http_client.closed is False

    async def test_endpoint_used_verbatim(self, mock_http_client):
        endpoint = "https://api.example.com/inventory/"
        mock_http_client.set_response("GET", endpoint, 200, json_data=[])
        mock_http_client.set_response("POST", endpoint, 200, json_data={"status": "ok"})
        client = RemoteStoreClient(f"  {endpoint} ", client=mock_http_client)

        assert client.endpoint == endpoint
        await client.read_remote()
        assert await client.write_remote(make_inventory()) is True
        assert [r["url"] for r in mock_http_client.requests] == [endpoint, endpoint]

    async def test_satisfies_protocol(self, remote_client):
        assert isinstance(remote_client, RemoteStoreProtocol)

    async def test_real_httpx_follows_redirect(self):
        records = [make_product_record(name="Shirt")]

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "script.example.com":
                return httpx.Response(302, headers={"Location": "https://content.example.com/echo"})
            return httpx.Response(200, json=records)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
        async with client:
            data = await RemoteStoreClient(REMOTE_ENDPOINT, client=client).read_remote()

        assert data.to_records() == records

    async def test_real_httpx_write_body(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, text="ok")

        data = make_inventory(product_count=1)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with client:
            ok = await RemoteStoreClient(REMOTE_ENDPOINT, client=client).write_remote(data)

        assert ok is True
        assert captured == {"method": "POST", "body": data.to_records()}
