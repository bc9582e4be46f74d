# ***********************************************************************
# *                                                                     *
# * Copyright (c) 2024 Ondsel                                           *
# *                                                                     *
# ***********************************************************************

import json
import unittest
from unittest import mock

import requests

import Utils
from APIClient import (
    APIClient,
    APIClientAuthenticationException,
    APIClientConnectionError,
    APIClientInvalidArgument,
    APIClientRequestException,
    APIClientResponseException,
)


def fake_response(status_code=200, body=None, text=None):
    response = mock.Mock()
    response.status_code = status_code
    response.url = "https://acme.egnyte.com/pubapi/v1/links"
    response.headers = {"Content-Type": "application/json"}
    if body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    else:
        response.json.return_value = body
        response.text = json.dumps(body)
    return response


class APIClientTest(unittest.TestCase):
    def setUp(self):
        self.session = mock.Mock()
        self.api_client = APIClient(
            "secret", domain="acme", timeout=5, session=self.session
        )

    def test_domain_or_host_is_required(self):
        with self.assertRaises(APIClientInvalidArgument):
            APIClient("secret")

    def test_build_url(self):
        self.assertEqual(
            self.api_client.build_url("/pubapi/v1/links"),
            "https://acme.egnyte.com/pubapi/v1/links",
        )
        self.assertEqual(
            self.api_client.build_url("/pubapi/v1/links", "count=1"),
            "https://acme.egnyte.com/pubapi/v1/links?count=1",
        )

    def test_host_overrides_domain(self):
        api_client = APIClient("secret", domain="acme", host="egnyte.example.com")

        self.assertEqual(api_client.base_url, "https://egnyte.example.com")

    def test_get_sends_default_headers(self):
        self.session.get.return_value = fake_response(body={"ids": []})

        result = self.api_client.get("https://acme.egnyte.com/pubapi/v1/links")

        self.assertEqual(result, {"ids": []})
        _, kwargs = self.session.get.call_args
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer secret")
        self.assertEqual(kwargs["headers"]["Accept"], "application/json")
        self.assertEqual(kwargs["timeout"], 5)

    def test_post_encodes_json(self):
        self.session.post.return_value = fake_response(201, body={"links": []})

        self.api_client.post("https://acme.egnyte.com/pubapi/v1/links", {"a": "b"})

        _, kwargs = self.session.post.call_args
        self.assertEqual(json.loads(kwargs["data"]), {"a": "b"})
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")

    def test_delete_does_not_decode(self):
        self.session.delete.return_value = fake_response(200, text="")

        self.assertEqual(
            self.api_client.delete("https://acme.egnyte.com/pubapi/v1/links/x"), ""
        )

    def test_unauthorized(self):
        self.session.get.return_value = fake_response(401, text="Unauthorized")

        with self.assertRaises(APIClientAuthenticationException):
            self.api_client.get("https://acme.egnyte.com/pubapi/v1/links")

    def test_error_status(self):
        self.session.get.return_value = fake_response(
            404, body={"errorMessage": "Link does not exist"}
        )

        with self.assertRaises(APIClientRequestException) as context:
            self.api_client.get("https://acme.egnyte.com/pubapi/v1/links/x")
        self.assertEqual(context.exception.status_code, 404)
        self.assertIn("Link does not exist", str(context.exception))

    def test_error_status_without_json(self):
        self.session.delete.return_value = fake_response(
            503, text="Service Unavailable"
        )

        with self.assertRaises(APIClientRequestException) as context:
            self.api_client.delete("https://acme.egnyte.com/pubapi/v1/links/x")
        self.assertIn("Service Unavailable", str(context.exception))

    def test_connection_error(self):
        self.session.get.side_effect = requests.exceptions.ConnectionError("boom")

        with self.assertRaises(APIClientConnectionError):
            self.api_client.get("https://acme.egnyte.com/pubapi/v1/links")

    def test_malformed_body(self):
        self.session.get.return_value = fake_response(200, text="<html>")

        with self.assertRaises(APIClientResponseException):
            self.api_client.get("https://acme.egnyte.com/pubapi/v1/links")

    def test_without_session_uses_requests(self):
        api_client = APIClient("secret", domain="acme")
        with mock.patch("APIClient.requests.get") as get:
            get.return_value = fake_response(body={"ids": ["a"]})

            self.assertEqual(
                api_client.get("https://acme.egnyte.com/pubapi/v1/links"),
                {"ids": ["a"]},
            )
        get.assert_called_once()


class EnvTest(unittest.TestCase):
    def test_timeout_from_environment(self):
        with mock.patch.object(Utils.env, "timeout", "12.5"):
            self.assertEqual(Utils.env.get_timeout(), 12.5)
            self.assertEqual(APIClient("secret", domain="acme").timeout, 12.5)

    def test_bad_timeout_falls_back_to_default(self):
        with mock.patch.object(Utils.env, "timeout", "soon"):
            self.assertEqual(Utils.env.get_timeout(), Utils.DEFAULT_TIMEOUT)

    def test_explicit_timeout_wins(self):
        with mock.patch.object(Utils.env, "timeout", "soon"):
            self.assertEqual(APIClient("secret", domain="acme", timeout=3).timeout, 3)


if __name__ == "__main__":
    unittest.main()
