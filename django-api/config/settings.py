"""Django settings for the ticket purchases app."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "purchases",
]

USE_TZ = True

TICKET_PURCHASE = {
    "MAX_TICKETS_PER_PURCHASE": int(os.environ.get("MAX_TICKETS_PER_PURCHASE", "25")),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "purchases": {
            "handlers": ["console"],
            "level": os.environ.get("PURCHASES_LOG_LEVEL", "INFO"),
        },
    },
}
