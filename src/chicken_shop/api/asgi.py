"""ASGI entrypoint for the chicken shop API."""

from chicken_shop.api.app import create_app
from chicken_shop.containers import build_container

app = create_app(build_container())
