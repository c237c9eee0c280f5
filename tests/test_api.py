"""
AlgoTest Backend - HTTP API Tests
==================================

What:  End-to-end tests of every route through the FastAPI app.
How:   HTTPX AsyncClient over ASGITransport; no server process is started.

What we test:
    ✅ Static endpoints: /health, /api/test, /api/algorithms
    ✅ POST /api/run-algorithm success bodies and 400 error bodies
    ✅ 404 for unmatched paths and methods, 500 for unexpected faults
    ✅ Request ID, security and CORS headers, including on 500 responses
    ✅ Non-finite JSON numbers rejected with 400
    ✅ Combined-format access log lines
"""

import logging
from unittest.mock import patch

import pytest

from algotest.config import settings
from algotest.services.executor import executor


class TestStaticEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["service"] == "algo-test-backend"
        assert body["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_api_info(self, test_client):
        response = await test_client.get("/api/test")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Welcome to AlgoTest API!"
        assert body["version"] == "1.0.0"
        assert "POST /api/run-algorithm - Run algorithm" in body["endpoints"]
        assert len(body["endpoints"]) == 4

    @pytest.mark.asyncio
    async def test_list_algorithms(self, test_client):
        response = await test_client.get("/api/algorithms")
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert [a["id"] for a in body["algorithms"]] == [1, 2, 3, 4]
        assert body["algorithms"][0] == {
            "id": 1,
            "name": "Bubble Sort",
            "description": "Simple sorting algorithm with O(n²) time complexity",
            "category": "Sorting",
            "difficulty": "Easy",
        }
        assert body["algorithms"][3]["category"] == "Graph"
        assert body["algorithms"][3]["difficulty"] == "Hard"


class TestRunAlgorithm:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("algorithm_id", [1, 2])
    async def test_sorts(self, test_client, algorithm_id):
        response = await test_client.post(
            "/api/run-algorithm",
            json={"algorithmId": algorithm_id, "input": [5, 3, 1, 4, 2]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["algorithmId"] == algorithm_id
        assert body["input"] == [5, 3, 1, 4, 2]
        assert body["result"] == [1, 2, 3, 4, 5]
        assert body["executionTime"] == f"{body['executionTimeMs']}ms"
        assert body["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_binary_search(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm",
            json={"algorithmId": 3, "input": {"array": [1, 2, 3, 4, 5], "target": 4}},
        )
        assert response.status_code == 200
        assert response.json()["result"] == 3

    @pytest.mark.asyncio
    async def test_shortest_path_stub(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm",
            json={"algorithmId": 4, "input": {"nodes": ["A", "B", "C"]}},
        )
        assert response.status_code == 200
        assert response.json()["result"]["path"] == "A->B->C"

    @pytest.mark.asyncio
    async def test_unknown_algorithm(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm", json={"algorithmId": 99, "input": [1]}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid algorithm ID"

    @pytest.mark.asyncio
    async def test_string_identifier_is_unknown(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm", json={"algorithmId": "1", "input": [2, 1]}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid algorithm ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{}, {"algorithmId": 1}, {"input": [1, 2]}, {"algorithmId": None, "input": None}],
    )
    async def test_missing_fields(self, test_client, body):
        response = await test_client.post("/api/run-algorithm", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: algorithmId and input"

    @pytest.mark.asyncio
    async def test_empty_body(self, test_client):
        response = await test_client.post("/api/run-algorithm")
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: algorithmId and input"

    @pytest.mark.asyncio
    async def test_non_object_body(self, test_client):
        response = await test_client.post("/api/run-algorithm", json=[1, [5, 3]])
        assert response.status_code == 400
        assert "JSON object" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_invalid_json(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm",
            content=b'{"algorithmId": 1, "input": [',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_search_input(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm", json={"algorithmId": 3, "input": [1, 2, 3]}
        )
        assert response.status_code == 400
        body = response.json()
        assert "array" in body["error"]
        assert body["details"]["field"] == "input"


class TestErrorResponses:

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/api/nope?x=1")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Route not found"
        assert body["path"] == "/api/nope?x=1"

    @pytest.mark.asyncio
    async def test_wrong_method_is_route_not_found(self, test_client):
        response = await test_client.get("/api/run-algorithm")
        assert response.status_code == 404
        assert response.json() == {
            "error": "Route not found",
            "path": "/api/run-algorithm",
            "request_id": response.headers["X-Request-ID"],
        }

    @pytest.mark.asyncio
    async def test_unexpected_fault_hides_message(self, fault_client):
        with patch.object(executor, "run", side_effect=RuntimeError("boom")):
            response = await fault_client.post(
                "/api/run-algorithm",
                json={"algorithmId": 1, "input": [1]},
                headers={"X-Request-ID": "trace-500"},
            )
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Something went wrong!"
        assert body["message"] == "Internal server error"
        assert body["request_id"] == "trace-500"
        assert response.headers["X-Request-ID"] == "trace-500"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_unexpected_fault_in_development(self, fault_client):
        with patch.object(executor, "run", side_effect=RuntimeError("boom")), \
             patch.object(settings, "environment", "development"):
            response = await fault_client.post(
                "/api/run-algorithm", json={"algorithmId": 1, "input": [1]}
            )
        assert response.status_code == 500
        assert response.json()["message"] == "boom"


class TestHeaders:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/test")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_propagated(self, test_client):
        response = await test_client.get("/api/test", headers={"X-Request-ID": "trace-42"})
        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm", json={}, headers={"X-Request-ID": "trace-43"}
        )
        assert response.json()["request_id"] == "trace-43"

    @pytest.mark.asyncio
    async def test_security_headers(self, test_client):
        response = await test_client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert "default-src 'self'" in response.headers["Content-Security-Policy"]

    @pytest.mark.asyncio
    async def test_docs_page_has_no_csp(self, test_client):
        response = await test_client.get("/docs")
        assert response.status_code == 200
        assert "Content-Security-Policy" not in response.headers
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_cors_allows_any_origin(self, test_client):
        response = await test_client.get(
            "/api/algorithms", headers={"Origin": "http://example.com"}
        )
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_oversized_request_id_replaced(self, test_client):
        response = await test_client.get("/api/test", headers={"X-Request-ID": "a" * 65})
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_at_length_limit_kept(self, test_client):
        rid = "b" * 64
        response = await test_client.get("/api/test", headers={"X-Request-ID": rid})
        assert response.headers["X-Request-ID"] == rid

    @pytest.mark.asyncio
    async def test_request_id_with_unsafe_characters_replaced(self, test_client):
        response = await test_client.get("/api/test", headers={"X-Request-ID": "id with spaces"})
        assert response.headers["X-Request-ID"] != "id with spaces"
        assert len(response.headers["X-Request-ID"]) == 8


class TestNonFiniteInput:

    @pytest.mark.asyncio
    async def test_nan_element_rejected(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm",
            content=b'{"algorithmId": 1, "input": [3, NaN, 1]}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "'input' must contain only numbers"

    @pytest.mark.asyncio
    async def test_infinite_target_rejected(self, test_client):
        response = await test_client.post(
            "/api/run-algorithm",
            content=b'{"algorithmId": 3, "input": {"array": [1, 2], "target": Infinity}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["details"]["field"] == "input.target"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_combined_format_line(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="algotest.access")
        response = await test_client.get(
            "/api/test?verbose=1",
            headers={
                "User-Agent": "algo-client/2.0",
                "Referer": "http://frontend.test/run",
                "X-Request-ID": "trace-log",
            },
        )
        records = [r for r in caplog.records if r.name == "algotest.access"]
        assert len(records) == 1
        record = records[0]
        line = record.getMessage()
        assert '"GET /api/test?verbose=1 HTTP/1.1" 200 ' in line
        assert f' 200 {response.headers["content-length"]} ' in line
        assert '"http://frontend.test/run" "algo-client/2.0"' in line
        assert line.endswith("[trace-log]")
        assert record.levelno == logging.INFO
        assert record.user_agent == "algo-client/2.0"

    @pytest.mark.asyncio
    async def test_client_error_logged_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="algotest.access")
        await test_client.post("/api/run-algorithm", json={})
        records = [r for r in caplog.records if r.name == "algotest.access"]
        assert records[-1].levelno == logging.WARNING
        assert records[-1].status == 400

    @pytest.mark.asyncio
    async def test_unhandled_fault_logged_as_500(self, fault_client, caplog):
        caplog.set_level(logging.INFO, logger="algotest.access")
        with patch.object(executor, "run", side_effect=RuntimeError("boom")):
            await fault_client.post("/api/run-algorithm", json={"algorithmId": 1, "input": [1]})
        records = [r for r in caplog.records if r.name == "algotest.access"]
        assert records[-1].levelno == logging.ERROR
        assert '" 500 - "' in records[-1].getMessage()

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="algotest.access")
        await test_client.get("/health")
        assert not [r for r in caplog.records if r.name == "algotest.access"]
