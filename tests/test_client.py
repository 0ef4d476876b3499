"""Unit tests for the recommendations HTTP client."""

import json
import unittest

import httpx

from papel_reco.recommendations.client import RecommendationClient, build_recommendations_url
from papel_reco.recommendations.errors import (
    ParseError,
    TransportError,
    ERROR_HTTP,
    ERROR_HTTP_STATUS,
    ERROR_TIMEOUT,
)
from papel_reco.recommendations.types import FetchFailure, FetchSuccess


URL = "http://backend.test/recommendation/articles"

BODY = {
    "because": {"_id": "b1", "title": "T"},
    "articles": [
        {"_id": "a1", "title": "A", "body": "B"},
        {"_id": "a2", "title": "C", "body": "D", "imgUri": "http://x/y.png"},
    ],
}


class TestBuildUrl(unittest.TestCase):
    def test_concatenates_segments(self):
        self.assertEqual(
            build_recommendations_url("http://localhost:3000/", "recommendation/"),
            "http://localhost:3000/recommendation/articles",
        )


class TestRecommendationClient(unittest.IsolatedAsyncioTestCase):
    def _client(self, handler):
        client = RecommendationClient(
            timeout_seconds=5,
            user_agent="papel-reco-tests",
            transport=httpx.MockTransport(handler),
        )
        self.addAsyncCleanup(client.aclose)
        return client

    async def test_success(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=BODY)

        outcome = await self._client(handler).fetch(URL, "tok-1")

        self.assertIsInstance(outcome, FetchSuccess)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.http_status, 200)
        self.assertEqual([a.id for a in outcome.result.articles], ["a1", "a2"])
        self.assertEqual(len(seen), 1)
        self.assertEqual(seen[0].method, "GET")
        self.assertEqual(str(seen[0].url), URL)
        self.assertEqual(seen[0].headers["Authorization"], "Bearer tok-1")
        self.assertEqual(seen[0].headers["User-Agent"], "papel-reco-tests")
        self.assertEqual(seen[0].content, b"")

    async def test_header_built_per_call(self):
        tokens = []

        def handler(request):
            tokens.append(request.headers["Authorization"])
            return httpx.Response(200, json=BODY)

        client = self._client(handler)
        await client.fetch(URL, "first")
        await client.fetch(URL, "second")

        self.assertEqual(tokens, ["Bearer first", "Bearer second"])

    async def test_empty_token_rejected(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=BODY)

        with self.assertRaises(ValueError):
            await self._client(handler).fetch(URL, "")
        self.assertEqual(calls, [])

    async def test_non_2xx_is_transport_error(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="down")

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertIsInstance(outcome, FetchFailure)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, TransportError)
        self.assertEqual(outcome.error.error_type, ERROR_HTTP_STATUS)
        self.assertEqual(outcome.error.status_code, 503)
        # no retry
        self.assertEqual(len(calls), 1)

    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertIsInstance(outcome.error, TransportError)
        self.assertEqual(outcome.error.error_type, ERROR_HTTP)
        self.assertIn("connection refused", outcome.error.detail)

    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertEqual(outcome.error.error_type, ERROR_TIMEOUT)

    async def test_redirect_loop(self):
        def handler(request):
            return httpx.Response(302, headers={"Location": URL})

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertIsInstance(outcome, FetchFailure)
        self.assertIsInstance(outcome.error, TransportError)
        self.assertEqual(outcome.error.error_type, ERROR_HTTP)
        self.assertIn("TooManyRedirects", outcome.error.detail)

    async def test_undecodable_gzip_body(self):
        def handler(request):
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"notgzip")

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertIsInstance(outcome, FetchFailure)
        self.assertIsInstance(outcome.error, TransportError)
        self.assertEqual(outcome.error.error_type, ERROR_HTTP)
        self.assertIn("DecodingError", outcome.error.detail)

    async def test_parse_failure_is_reported_not_raised(self):
        def handler(request):
            return httpx.Response(200, text='{"articles": []}')

        outcome = await self._client(handler).fetch(URL, "tok")

        self.assertIsInstance(outcome, FetchFailure)
        self.assertIsInstance(outcome.error, ParseError)


if __name__ == "__main__":
    unittest.main()
