# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

from enum import StrEnum

# The values are the tokens used on the wire. Decoding is lenient: whatever
# the server sends that we do not know falls back to the most permissive
# member so newer server vocabulary never breaks a call.


class LinkType(StrEnum):
    FILE = "file"
    FOLDER = "folder"

    @classmethod
    def from_wire(cls, value):
        match str(value or "").lower():
            case "file":
                return cls.FILE
            case _:
                return cls.FOLDER


class LinkAccessibility(StrEnum):
    ANYONE = "anyone"
    PASSWORD = "password"
    DOMAIN = "domain"
    RECIPIENTS = "recipients"

    @classmethod
    def from_wire(cls, value):
        match str(value or "").lower():
            case "domain":
                return cls.DOMAIN
            case "password":
                return cls.PASSWORD
            case "recipients":
                return cls.RECIPIENTS
            case _:
                return cls.ANYONE


class ProtectionType(StrEnum):
    NONE = "none"
    PREVIEW = "preview"
    PREVIEW_DOWNLOAD = "preview_download"

    @classmethod
    def from_wire(cls, value):
        match str(value or "").lower():
            case "preview":
                return cls.PREVIEW
            case "preview_download":
                return cls.PREVIEW_DOWNLOAD
            case _:
                return cls.NONE
