"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    PRODUCT_CATALOG_PATH: str = os.getenv(
        "PRODUCT_CATALOG_PATH",
        os.path.join(os.path.dirname(__file__), "products.json"),
    )

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
