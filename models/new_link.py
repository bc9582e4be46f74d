# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import Utils
from models.link import LinkAccessibility, LinkType


@dataclass
class NewLink:
    """
    Parameters of a link to create. path, type and accessibility are
    required; every other field is only sent when set, because the server
    treats the presence of a field as intent:

    {
        "path": "/Shared/docs/q1.pdf",
        "type": "file",
        "accessibility": "password",
        "send_email": "true",
        "recipients": ["someone@example.com"],
        "message": "string",
        "copy_me": "false",
        "notify": "true",
        "link_to_current": "false",
        "expiry_date": "2024-12-31",
        "expiry_clicks": "5",
    }
    """

    path: str
    type: LinkType
    accessibility: LinkAccessibility
    send_email: Optional[bool] = None
    recipients: list[str] = field(default_factory=list)
    message: Optional[str] = None
    copy_me: Optional[bool] = None
    notify: Optional[bool] = None
    link_to_current: Optional[bool] = None
    expiry_date: Optional[date] = None
    expiry_clicks: Optional[int] = None

    def normalize_path(self):
        if not self.path.startswith("/"):
            self.path = "/" + self.path

    def to_json(self):
        payload = {
            "path": self.path,
            "type": LinkType(self.type).value,
            "accessibility": LinkAccessibility(self.accessibility).value,
        }

        if self.send_email is not None:
            payload["send_email"] = Utils.wire_bool(self.send_email)
        if self.recipients:
            payload["recipients"] = [str(r) for r in self.recipients]
        if not Utils.is_blank(self.message):
            payload["message"] = self.message
        if self.copy_me is not None:
            payload["copy_me"] = Utils.wire_bool(self.copy_me)
        if self.notify is not None:
            payload["notify"] = Utils.wire_bool(self.notify)
        if self.link_to_current is not None:
            payload["link_to_current"] = Utils.wire_bool(self.link_to_current)
        if self.expiry_date is not None:
            payload["expiry_date"] = Utils.format_wire_date(self.expiry_date)
        if self.expiry_clicks is not None:
            payload["expiry_clicks"] = str(self.expiry_clicks)

        return payload
