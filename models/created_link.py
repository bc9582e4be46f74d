# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import Utils
from models.link import LinkAccessibility, LinkType


@dataclass(frozen=True, order=True)
class LinkSummary:
    id: str
    url: str
    recipients: tuple[str, ...] = field(default_factory=tuple, repr=False)

    @classmethod
    def from_json(cls, json_data):
        data = Utils.filter_known_fields(cls, json_data)
        data["recipients"] = tuple(data.get("recipients") or ())
        return cls(**data)


# one path can be shared through several urls, for instance one per recipient
@dataclass(frozen=True)
class CreatedLink:
    links: tuple[LinkSummary, ...]
    path: str
    type: LinkType
    accessibility: LinkAccessibility
    notify: bool = False
    link_to_current: bool = False
    expiry_date: Optional[date] = None
    creation_date: Optional[datetime] = None
    created_by: Optional[str] = None

    @property
    def ids(self):
        return [link.id for link in self.links]

    @property
    def urls(self):
        return [link.url for link in self.links]

    @classmethod
    def from_json(cls, json_data):
        return cls(
            links=tuple(
                LinkSummary.from_json(link) for link in json_data["links"]
            ),
            path=json_data["path"],
            type=LinkType.from_wire(json_data.get("type")),
            accessibility=LinkAccessibility.from_wire(json_data.get("accessibility")),
            notify=Utils.parse_wire_bool(json_data.get("notify", False)),
            link_to_current=Utils.parse_wire_bool(
                json_data.get("link_to_current", False)
            ),
            expiry_date=Utils.parse_wire_date(json_data.get("expiry_date")),
            creation_date=Utils.parse_wire_datetime(json_data.get("creation_date")),
            created_by=json_data.get("created_by"),
        )
