"""
Request helper tests.

Tests URL construction, header merging, query encoding and error
propagation of the HTTP chokepoint shared by every API call.
"""

import unittest
from unittest.mock import Mock

import requests  # type: ignore

from conftest import make_response
from seacloud.api import SeacloudAPI


def prepared_url(mock_request):
    """Rebuild the final URL (with query string) of the last mocked call."""
    kwargs = mock_request.call_args.kwargs
    return requests.Request(
        kwargs["method"], kwargs["url"], params=kwargs["params"]
    ).prepare().url


class TestRequestHelper(unittest.TestCase):
    """Test the shared request helper."""

    def setUp(self):
        self.client = SeacloudAPI(base_url="https://api.test/")
        self.client.session.request = Mock(return_value=make_response(body={"ok": True}))

    def test_url_is_base_plus_endpoint(self):
        self.client.get("/Locations")

        kwargs = self.client.session.request.call_args.kwargs
        self.assertEqual(kwargs["url"], "https://api.test/Locations")
        self.assertEqual(kwargs["method"], "GET")
        self.assertIsNone(kwargs["params"])

    def test_default_content_type(self):
        self.client.get("/Locations")

        headers = self.client.session.request.call_args.kwargs["headers"]
        self.assertEqual(headers["Content-Type"], "application/json")
        self.assertNotIn("Authorization", headers)

    def test_caller_headers_win_over_defaults(self):
        self.client._request("GET", "/Locations", headers={"Content-Type": "text/plain", "X-Trace": "1"})

        headers = self.client.session.request.call_args.kwargs["headers"]
        self.assertEqual(headers["Content-Type"], "text/plain")
        self.assertEqual(headers["X-Trace"], "1")

    def test_bearer_token_overrides_caller_authorization(self):
        self.client.id_token = "token-1"
        self.client.refresh_token = "refresh-1"

        self.client._request("GET", "/Locations", headers={"authorization": "Basic abc"})

        headers = self.client.session.request.call_args.kwargs["headers"]
        self.assertEqual(headers["Authorization"], "Bearer token-1")
        self.assertNotIn("authorization", headers)

    def test_query_parameters_keep_insertion_order(self):
        self.client.get("/Sensors/1/Values", params={"to": "2024-02-01T00:00:00.000Z", "from": "2024-01-01T00:00:00.000Z"})

        url = prepared_url(self.client.session.request)
        self.assertEqual(
            url,
            "https://api.test/Sensors/1/Values"
            "?to=2024-02-01T00%3A00%3A00.000Z&from=2024-01-01T00%3A00%3A00.000Z"
        )

    def test_returns_parsed_json(self):
        self.client.session.request.return_value = make_response(body=[{"id": 1}])

        self.assertEqual(self.client.get("/Locations"), [{"id": 1}])

    def test_http_error_carries_status(self):
        for status in (404, 500):
            with self.subTest(status=status):
                self.client.session.request.return_value = make_response(status_code=status, body={})

                with self.assertLogs("seacloud", level="ERROR"):
                    with self.assertRaises(requests.exceptions.HTTPError) as ctx:
                        self.client.get("/Locations")

                self.assertEqual(ctx.exception.response.status_code, status)
                self.assertIn(str(status), str(ctx.exception))

    def test_http_error_does_not_read_body(self):
        self.client.session.request.return_value = make_response(status_code=500, raw=b"<html>oops")

        with self.assertLogs("seacloud", level="ERROR"):
            with self.assertRaises(requests.exceptions.HTTPError) as ctx:
                self.client.get("/Locations")

        self.assertEqual(ctx.exception.response.reason, "Internal Server Error")

    def test_invalid_json_propagates(self):
        self.client.session.request.return_value = make_response(raw=b"not json")

        with self.assertLogs("seacloud", level="ERROR"):
            with self.assertRaises(requests.exceptions.JSONDecodeError):
                self.client.get("/Locations")

    def test_transport_error_reraised_unchanged_without_retry(self):
        error = requests.exceptions.ConnectionError("connection refused")
        self.client.session.request.side_effect = error

        with self.assertLogs("seacloud", level="ERROR") as logs:
            with self.assertRaises(requests.exceptions.ConnectionError) as ctx:
                self.client.get("/Locations")

        self.assertIs(ctx.exception, error)
        self.assertEqual(self.client.session.request.call_count, 1)
        self.assertIn("API request failed: GET https://api.test/Locations", logs.output[0])

    def test_no_timeout_by_default(self):
        self.client.get("/Locations")

        self.assertIsNone(self.client.session.request.call_args.kwargs["timeout"])

    def test_post_sends_json_body(self):
        self.client.post("/authenticate", {"username": "u"})

        kwargs = self.client.session.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "POST")
        self.assertEqual(kwargs["json"], {"username": "u"})


class TestClientLifecycle(unittest.TestCase):
    """Test construction and teardown of the client."""

    def test_default_base_url(self):
        client = SeacloudAPI()

        self.assertEqual(client.base_url, "https://api.seacloud.no")
        self.assertIsNone(client.id_token)
        self.assertIsNone(client.refresh_token)
        self.assertFalse(client.is_authenticated)

    def test_close_clears_tokens(self):
        client = SeacloudAPI(base_url="https://api.test")
        client.session = Mock()
        client.id_token = "a"
        client.refresh_token = "b"

        client.close()

        self.assertIsNone(client.id_token)
        self.assertIsNone(client.refresh_token)
        client.session.close.assert_called_once()

    def test_context_manager_closes_session(self):
        with SeacloudAPI(base_url="https://api.test") as client:
            client.session = Mock()

        client.session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
