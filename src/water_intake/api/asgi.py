"""ASGI entrypoint for the water intake API."""

from water_intake.api.app import create_app
from water_intake.containers import build_container

app = create_app(build_container())
