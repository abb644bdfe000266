"""Typed keys for state stored on the aiohttp application."""

from aiohttp import web

from src.config import Settings
from src.integrations.services import Services

SERVICES = web.AppKey("services", Services)
SETTINGS = web.AppKey("settings", Settings)
