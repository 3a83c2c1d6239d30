class TestServiceEndpoints:
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Storefront Product API is running"

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json()["status"] == "healthy"

    async def test_request_id_header_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/nope")
        assert response.status_code == 404
        assert response.json()["success"] is False
