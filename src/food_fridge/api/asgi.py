"""ASGI entrypoint for the food fridge API."""

from food_fridge.api.app import create_app
from food_fridge.config import Settings

app = create_app(Settings())
