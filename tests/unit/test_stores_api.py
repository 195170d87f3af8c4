from urllib.parse import unquote

from fastapi.testclient import TestClient


class TestStoresApi:
    def test_list_all_stores(self, client: TestClient):
        response = client.get("/api/v1/stores")

        assert response.status_code == 200
        data = response.json()
        assert [store["id"] for store in data] == ["myntra", "ajio", "amazon", "flipkart", "hm", "zara"]
        assert data[0]["orderHistoryUrl"] == "https://www.myntra.com/my/orders"

    def test_list_enabled_stores(self, client: TestClient):
        response = client.get("/api/v1/stores", params={"enabled_only": "true"})

        assert [store["id"] for store in response.json()] == ["myntra", "ajio"]

    def test_bookmarklet(self, client: TestClient):
        response = client.get("/api/v1/stores/myntra/bookmarklet")

        assert response.status_code == 200
        data = response.json()
        assert data["version"] == "1.2.0"
        assert data["code"].startswith("javascript:")
        assert unquote(data["code"]).endswith("})();")

    def test_bookmarklet_for_unsupported_store(self, client: TestClient):
        response = client.get("/api/v1/stores/nykaa/bookmarklet")

        assert response.status_code == 404
        assert "nykaa" in response.json()["detail"]

    def test_console_script(self, client: TestClient):
        response = client.get("/api/v1/stores/ajio/console-script")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("// WardrobeImport Ajio Scraper")

    def test_console_script_for_unsupported_store(self, client: TestClient):
        assert client.get("/api/v1/stores/nykaa/console-script").status_code == 404

    def test_instructions(self, client: TestClient):
        response = client.get("/api/v1/stores/ajio/instructions")

        assert response.status_code == 200
        data = response.json()
        assert data["orderUrl"] == "https://www.ajio.com/my-account/orders"
        assert any("opened individually" in tip for tip in data["tips"])

    def test_instructions_for_unknown_store(self, client: TestClient):
        response = client.get("/api/v1/stores/nykaa/instructions")

        assert response.status_code == 200
        assert response.json()["steps"] == ["This store is not yet supported"]
