# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from dataclasses import dataclass
from datetime import date
from typing import Optional
from urllib.parse import quote, urlencode

import Utils
from models.link import LinkAccessibility, LinkType


@dataclass(frozen=True)
class LinkFilter:
    """Filters for listing links. Every field is optional.

    Note that a user who is not an admin only ever sees the links they
    created, whatever the filter says."""

    path: Optional[str] = None
    username: Optional[str] = None
    created_before: Optional[date] = None
    created_after: Optional[date] = None
    link_type: Optional[LinkType] = None
    accessibility: Optional[LinkAccessibility] = None
    offset: Optional[int] = None
    count: Optional[int] = None

    def to_query_params(self):
        "Only the filters that are set, in the order the API documents them"
        self._check_types()
        params = {}
        if not Utils.is_blank(self.path):
            params["path"] = self.path
        if not Utils.is_blank(self.username):
            params["username"] = self.username
        if self.created_before is not None:
            params["created_before"] = Utils.format_wire_date(self.created_before)
        if self.created_after is not None:
            params["created_after"] = Utils.format_wire_date(self.created_after)
        if self.link_type is not None:
            params["type"] = LinkType(self.link_type).value
        if self.accessibility is not None:
            params["accessibility"] = LinkAccessibility(self.accessibility).value
        if self.offset is not None:
            params["offset"] = str(self.offset)
        if self.count is not None:
            params["count"] = str(self.count)
        return params

    def _check_types(self):
        for name in ("created_before", "created_after"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, date):
                raise ValueError(f"{name} must be a date: {value!r}")
        for name in ("offset", "count"):
            value = getattr(self, name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value < 0
            ):
                raise ValueError(f"{name} must be a non-negative integer: {value!r}")

    def to_query_string(self):
        return urlencode(self.to_query_params(), safe="/", quote_via=quote)
