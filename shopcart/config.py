"""
Environment-driven settings for shopcart.

All values are read once at import time. Tests that need different values
should pass them explicitly (e.g. ``SummaryFormatter(template=...)``) rather
than mutate the environment.
"""

import os

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
ENVIRONMENT = os.environ.get("SHOPCART_ENV", "development").lower()
IS_PRODUCTION = ENVIRONMENT == "production"

# Summary rendering
DEFAULT_SUMMARY_TEMPLATE = "Total: {total}, Items: {count}"
SUMMARY_TEMPLATE = os.environ.get("SHOPCART_SUMMARY_TEMPLATE", DEFAULT_SUMMARY_TEMPLATE)

__all__ = [
    "LOG_LEVEL",
    "ENVIRONMENT",
    "IS_PRODUCTION",
    "DEFAULT_SUMMARY_TEMPLATE",
    "SUMMARY_TEMPLATE",
]
