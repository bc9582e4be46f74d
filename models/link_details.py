# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import Utils
from models.link import LinkAccessibility, LinkType, ProtectionType


@dataclass(frozen=True, order=True)
class LinkDetails:
    id: str
    url: str
    path: str
    type: LinkType
    accessibility: LinkAccessibility
    notify: bool = False
    link_to_current: bool = False
    creation_date: Optional[datetime] = None
    created_by: Optional[str] = None
    expiry_date: Optional[date] = None
    expiry_clicks: Optional[int] = None
    last_accessed: Optional[datetime] = None
    protection: ProtectionType = ProtectionType.NONE
    recipients: tuple[str, ...] = field(default_factory=tuple, repr=False)

    @classmethod
    def from_json(cls, json_data):
        return cls(
            id=json_data["id"],
            url=json_data["url"],
            path=json_data["path"],
            type=LinkType.from_wire(json_data.get("type")),
            accessibility=LinkAccessibility.from_wire(json_data.get("accessibility")),
            notify=Utils.parse_wire_bool(json_data.get("notify", False)),
            link_to_current=Utils.parse_wire_bool(
                json_data.get("link_to_current", False)
            ),
            creation_date=Utils.parse_wire_datetime(json_data.get("creation_date")),
            created_by=json_data.get("created_by"),
            expiry_date=Utils.parse_wire_date(json_data.get("expiry_date")),
            expiry_clicks=Utils.parse_wire_int(json_data.get("expiry_clicks")),
            last_accessed=Utils.parse_wire_datetime(json_data.get("last_accessed")),
            protection=ProtectionType.from_wire(json_data.get("protection")),
            recipients=tuple(json_data.get("recipients") or ()),
        )
