import os
from dataclasses import dataclass
from dotenv import load_dotenv

from domain.constants import PAGES, DEFAULT_START_PAGE

load_dotenv()  # loads .env into environment


@dataclass
class Settings:
    app_title: str = "Smart Farming Assistant"
    start_page: str = DEFAULT_START_PAGE
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment (re-read each call).

    Unknown START_PAGE values fall back to the default start page.
    """
    start_page = os.getenv("START_PAGE", DEFAULT_START_PAGE).strip()
    if start_page not in PAGES:
        start_page = DEFAULT_START_PAGE
    return Settings(
        app_title=os.getenv("APP_TITLE", Settings.app_title),
        start_page=start_page,
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
    )
