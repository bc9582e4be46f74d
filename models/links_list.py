# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from dataclasses import dataclass, field
from typing import Optional

import Utils


@dataclass(frozen=True)
class LinksList:
    ids: tuple[str, ...] = field(default_factory=tuple)
    offset: Optional[int] = None
    count: Optional[int] = None
    total_count: Optional[int] = None

    @classmethod
    def from_json(cls, json_data):
        """makes forgiving of extra fields"""
        data = Utils.filter_known_fields(cls, json_data)
        data["ids"] = tuple(data.get("ids") or ())
        return cls(**data)
