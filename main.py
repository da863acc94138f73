"""ASGI entrypoint: serve ``main:app`` with any ASGI server."""

from poeaa_registry.apps.api.app import create_app

app = create_app()
