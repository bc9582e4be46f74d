# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from urllib.parse import quote

import Utils
from APIClient import APIClient, APIClientInvalidArgument, APIClientResponseException
from models.created_link import CreatedLink
from models.link import LinkAccessibility, LinkType
from models.link_details import LinkDetails
from models.link_filter import LinkFilter
from models.links_list import LinksList

logger = Utils.getLogger(__name__)

LINKS_ENDPOINT = "/pubapi/v1/links"


class LinksClient:
    """List, inspect, create and delete shareable links.

    Everything that touches the network goes through the injected APIClient;
    this class only validates, encodes and decodes."""

    def __init__(self, api_client):
        self.api_client = api_client

    @classmethod
    def create(cls, access_token, domain=None, host=None, **kwargs):
        domain = domain if domain is not None else Utils.env.domain
        host = host if host is not None else Utils.env.host
        return cls(APIClient(access_token, domain=domain, host=host, **kwargs))

    def list_links(self, link_filter=None):
        """Lists links matching the filter.

        If the user executing this is not an admin only links created by the
        user are listed."""
        if link_filter is None:
            link_filter = LinkFilter()

        try:
            query = link_filter.to_query_string()
        except ValueError as e:
            raise APIClientInvalidArgument(f"Invalid link filter: {e}") from e
        url = self.api_client.build_url(LINKS_ENDPOINT, query)
        logger.debug(f"Listing links: {url}")

        result = self.api_client.get(url)
        return self._map(LinksList, result)

    def get_link_details(self, link_id):
        self._check_link_id(link_id)

        url = self.api_client.build_url(self._link_endpoint(link_id))
        logger.debug(f"Getting details of link {link_id}")

        result = self.api_client.get(url)
        return self._map(LinkDetails, result)

    def create_link(self, new_link):
        self._check_new_link(new_link)
        new_link.normalize_path()

        url = self.api_client.build_url(LINKS_ENDPOINT)
        logger.debug(f"Creating {new_link.type} link for {new_link.path}")

        result = self.api_client.post(url, new_link.to_json())
        return self._map(CreatedLink, result)

    def delete_link(self, link_id):
        """Deletes a link.

        The server answers without a body, so success is the absence of an
        error."""
        self._check_link_id(link_id)

        url = self.api_client.build_url(self._link_endpoint(link_id))
        logger.debug(f"Deleting link {link_id}")

        self.api_client.delete(url)
        return True

    def _link_endpoint(self, link_id):
        return f"{LINKS_ENDPOINT}/{quote(link_id, safe='')}"

    def _check_link_id(self, link_id):
        if not isinstance(link_id, str) or Utils.is_blank(link_id):
            raise APIClientInvalidArgument("link_id is required")

    def _check_new_link(self, new_link):
        if new_link is None:
            raise APIClientInvalidArgument("new_link is required")

        if not isinstance(new_link.path, str) or Utils.is_blank(new_link.path):
            raise APIClientInvalidArgument("new_link.path is required")

        if new_link.type is None:
            raise APIClientInvalidArgument("new_link.type is required")
        try:
            LinkType(new_link.type)
        except ValueError:
            raise APIClientInvalidArgument(
                f"new_link.type is not a link type: {new_link.type}"
            ) from None

        if new_link.accessibility is None:
            raise APIClientInvalidArgument("new_link.accessibility is required")
        try:
            LinkAccessibility(new_link.accessibility)
        except ValueError:
            raise APIClientInvalidArgument(
                f"new_link.accessibility is not an accessibility: "
                f"{new_link.accessibility}"
            ) from None

        for name in ("send_email", "copy_me", "notify", "link_to_current"):
            value = getattr(new_link, name)
            if value is not None and not isinstance(value, bool):
                raise APIClientInvalidArgument(
                    f"new_link.{name} must be True, False or None: {value!r}"
                )

        clicks = new_link.expiry_clicks
        if clicks is not None and (
            isinstance(clicks, bool) or not isinstance(clicks, int) or clicks < 1
        ):
            raise APIClientInvalidArgument(
                f"new_link.expiry_clicks must be a positive integer: {clicks}"
            )

    def _map(self, cls, json_data):
        try:
            return cls.from_json(json_data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.debug(f"Cannot map response to {cls.__name__}: {json_data}")
            raise APIClientResponseException(
                f"Unexpected response for {cls.__name__}: {e!r}"
            ) from e
