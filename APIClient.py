# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

import json

import requests

import Utils

logger = Utils.getLogger(__name__)

USER_AGENT = "egnyte-links-python"
EGNYTE_HOST_SUFFIX = "egnyte.com"


class APIClientException(Exception):
    pass


class APIClientInvalidArgument(APIClientException, ValueError):
    pass


class APIClientAuthenticationException(APIClientException):
    pass


class APIClientConnectionError(APIClientException):
    pass


class APIClientRequestException(APIClientException):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class APIClientResponseException(APIClientException):
    pass


UNAUTHORIZED = requests.codes.unauthorized


class APIClient:
    """Executes requests against the public API of one Egnyte domain.

    Owns the bearer token, the default headers and the transport. Callers
    hand in absolute urls, usually composed with `build_url`."""

    def __init__(self, access_token, domain="", host="", timeout=None, session=None):
        if Utils.is_blank(domain) and Utils.is_blank(host):
            raise APIClientInvalidArgument("Either a domain or a host is required")

        self.access_token = access_token
        self.domain = domain
        self.host = host
        self.timeout = timeout if timeout is not None else Utils.env.get_timeout()
        self.session = session

        if Utils.is_blank(host):
            self.base_url = f"https://{domain}.{EGNYTE_HOST_SUFFIX}"
        else:
            self.base_url = f"https://{host}"

    def build_url(self, endpoint, query=""):
        url = f"{self.base_url}{endpoint}"
        if query:
            url = f"{url}?{query}"
        return url

    def _transport(self):
        return self.session if self.session is not None else requests

    def _raiseException(self, response, **kwargs):
        "Raise a generic exception based on the status code"
        # dumps only when debugging is enabled
        self._dump_response(response, **kwargs)
        raise APIClientRequestException(
            f"API request failed with status code {response.status_code}: "
            + self._error_message(response),
            status_code=response.status_code,
        )

    def _error_message(self, response):
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            for key in ("errorMessage", "message"):
                if key in body:
                    return str(body[key])
        return response.text

    def _set_default_headers(self, headers):
        headers["Authorization"] = f"Bearer {self.access_token}"
        headers["Accept"] = "application/json"
        headers["User-Agent"] = USER_AGENT

        return headers

    def _set_content_type(self):
        headers = {"Content-Type": "application/json"}
        return headers

    def _decode(self, response):
        try:
            return response.json()
        except ValueError as e:
            raise APIClientResponseException(
                f"Response from {response.url} is not valid JSON"
            ) from e

    def _check(self, response, **kwargs):
        if 200 <= response.status_code < 300:
            return
        elif response.status_code == UNAUTHORIZED:
            self._dump_response(response, **kwargs)
            raise APIClientAuthenticationException("Not authenticated")
        else:
            self._raiseException(response, **kwargs)

    def get(self, url, headers=None):
        headers = self._set_default_headers(headers or {})
        try:
            response = self._transport().get(
                url, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise APIClientConnectionError(e) from e

        self._check(response, url=url, headers=headers)
        return self._decode(response)

    def post(self, url, payload, headers=None):
        headers = self._set_default_headers({**self._set_content_type(), **(headers or {})})
        data = json.dumps(payload)
        try:
            response = self._transport().post(
                url, headers=headers, data=data, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise APIClientConnectionError(e) from e

        self._check(response, url=url, headers=headers, data=data)
        return self._decode(response)

    def delete(self, url, headers=None):
        headers = self._set_default_headers(headers or {})
        try:
            response = self._transport().delete(
                url, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise APIClientConnectionError(e) from e

        # delete responses carry no structured body
        self._check(response, url=url, headers=headers)
        return response.text

    def _dump_response(self, response, **kwargs):
        logger.debug("XXXXXX Call Data XXXXXX")
        for key, value in kwargs.items():
            if key == "headers":
                value = {
                    k: ("<redacted>" if k == "Authorization" else v)
                    for k, v in value.items()
                }
            logger.debug(f"{key} {value}")
        logger.debug("XXXXXXXXXXXXXXXXXXXXXXX")

        logger.debug(response)
        logger.debug(f"Status code: {response.status_code}")
        logger.debug(f"Content-Type: {response.headers.get('Content-Type')}")
        logger.debug(f"Response body (text): {response.text}")
