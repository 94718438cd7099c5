"""Jinja2 environment for the admin screens."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from translation_stats.services.settings_api import get_path

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals["get_path"] = get_path
