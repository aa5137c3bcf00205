# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "teamcity-client"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

BASIC_AUTH_PREFIX = "Basic "

STARTED_AT_FORMAT = "%b %y %H:%M:%S"
