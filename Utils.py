# SPDX-FileCopyrightText: 2024 Ondsel <development@ondsel.com>
#
# SPDX-License-Identifier: LGPL-2.0-or-later

import inspect
import os
import logging
from datetime import date, datetime

DEFAULT_TIMEOUT = 30

WIRE_DATE_FORMAT = "%Y-%m-%d"


class __EgnyteEnv:
    """
    this class allows for specific OS environments, such as in docker images, to
    have special operating parameters. It is also useful for testing as one
    can SET these vars locally on your own machine.
    However, typical users will NOT have the `EGNYTE_` variables set, so make sure
    the ".get" defaults are what you expect for production end-user usage.

    In Linux, a local .env file can be used with:

        set -a; . ./.env; set +a

    For consistency, please use the `env` singleton declared just below. aka:

        domain = Utils.env.domain
    """

    def __init__(self):
        self.domain = os.environ.get("EGNYTE_DOMAIN", "")
        self.host = os.environ.get("EGNYTE_HOST", "")
        self.timeout = os.environ.get("EGNYTE_TIMEOUT", str(DEFAULT_TIMEOUT))
        self.debug_level = os.environ.get("EGNYTE_DEBUG_LEVEL", "info")

    def get_debug_level(self):
        if self.debug_level == "info":
            return logging.INFO
        elif self.debug_level == "debug":
            return logging.DEBUG
        elif self.debug_level == "error":
            return logging.ERROR
        elif self.debug_level == "warning":
            return logging.WARNING
        else:
            return logging.INFO

    def get_timeout(self):
        try:
            return float(self.timeout)
        except ValueError:
            return DEFAULT_TIMEOUT


env = __EgnyteEnv()


def getLogger(name):
    logger = logging.getLogger(name)
    logger.setLevel(env.get_debug_level())
    if logger.handlers:
        # modules may ask for the same logger more than once
        return logger
    handler = logging.StreamHandler()
    if env.get_debug_level() >= logging.INFO:
        formatter = logging.Formatter("%(levelname)s: %(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s: %(name)s:%(lineno)d %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def is_blank(value):
    return value is None or (isinstance(value, str) and value.strip() == "")


def wire_bool(value):
    "The links API expects booleans as the strings 'true' and 'false'"
    return "true" if value else "false"


def format_wire_date(value):
    return value.strftime(WIRE_DATE_FORMAT)


def parse_wire_datetime(value):
    """Parse an ISO-8601 timestamp as sent by the server.

    Returns None for missing values; raises ValueError for garbage."""
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def parse_wire_date(value):
    """Parse a calendar date. A full timestamp is truncated to its date."""
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if len(value) == len("YYYY-MM-DD"):
        return date.fromisoformat(value)
    return datetime.fromisoformat(value).date()


def filter_known_fields(cls, json_data):
    """makes forgiving of extra fields"""
    return {
        k: v for k, v in json_data.items() if k in inspect.signature(cls).parameters
    }


def parse_wire_bool(value):
    "Booleans come back either as JSON booleans or as 'true'/'false' strings"
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def parse_wire_int(value):
    if is_blank(value):
        return None
    return int(value)
