import unittest

from fastapi.testclient import TestClient

from product_intelligence.main import create_app


class SearchEndpointTest(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(create_app())

    def test_echoes_query(self) -> None:
        resp = self.client.post("/api/search", json={"query": "shoes"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"query": "shoes", "message": "Search endpoint working"})

    def test_missing_query_is_rejected(self) -> None:
        resp = self.client.post("/api/search", json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Missing query"})

    def test_falsy_queries_are_rejected(self) -> None:
        for query in ("", None, 0, False):
            with self.subTest(query=query):
                resp = self.client.post("/api/search", json={"query": query})
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Missing query"})

    def test_non_object_body_counts_as_missing_query(self) -> None:
        for body in ([], ["shoes"], "shoes", 42):
            with self.subTest(body=body):
                resp = self.client.post("/api/search", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Missing query"})

    def test_non_string_query_is_echoed_unchanged(self) -> None:
        resp = self.client.post("/api/search", json={"query": 12})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["query"], 12)

    def test_extra_fields_are_ignored(self) -> None:
        resp = self.client.post("/api/search", json={"query": "boots", "page": 3})
        self.assertEqual(resp.json(), {"query": "boots", "message": "Search endpoint working"})

    def test_malformed_body(self) -> None:
        resp = self.client.post(
            "/api/search",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Invalid JSON body"})

    def test_non_finite_numbers_are_malformed(self) -> None:
        for raw in (b'{"query": NaN}', b'{"query": Infinity}', b'{"query": -Infinity}', b'{"query": 1e400}'):
            with self.subTest(raw=raw):
                resp = self.client.post("/api/search", content=raw, headers={"content-type": "application/json"})
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Invalid JSON body"})

    def test_finite_float_query_is_echoed(self) -> None:
        resp = self.client.post("/api/search", content=b'{"query": 2.5e3}')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["query"], 2500.0)

    def test_empty_containers_count_as_missing_query(self) -> None:
        for query in ([], {}):
            with self.subTest(query=query):
                resp = self.client.post("/api/search", json={"query": query})
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Missing query"})

    def test_empty_body_is_malformed(self) -> None:
        resp = self.client.post("/api/search", content=b"")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Invalid JSON body"})

    def test_repeated_calls_are_byte_identical(self) -> None:
        first = self.client.post("/api/search", json={"query": "shoes"})
        second = self.client.post("/api/search", json={"query": "shoes"})
        self.assertEqual(first.content, second.content)
        self.assertEqual(first.content, b'{"query":"shoes","message":"Search endpoint working"}')

    def test_get_is_not_allowed(self) -> None:
        resp = self.client.get("/api/search")
        self.assertEqual(resp.status_code, 405)


if __name__ == "__main__":
    unittest.main()
