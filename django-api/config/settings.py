"""Django settings for the box office API.

The inventory lives in memory, so no database or contrib apps are configured.
"""

import os

SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-boxoffice-dev-key")

DEBUG = int(os.environ.get("DEBUG", 0))

if os.environ.get("DJANGO_ALLOWED_HOSTS"):
    ALLOWED_HOSTS = os.environ["DJANGO_ALLOWED_HOSTS"].split(",")
else:
    ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

INSTALLED_APPS = [
    "rest_framework",
    "boxoffice",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

BOXOFFICE = {
    "BASE_ROWS": int(os.environ.get("BOXOFFICE_BASE_ROWS", 8)),
    "BASE_COLUMNS": int(os.environ.get("BOXOFFICE_BASE_COLUMNS", 12)),
    "MAX_SEATS_PER_SALE": int(os.environ.get("BOXOFFICE_MAX_SEATS_PER_SALE", 6)),
    "INITIAL_EVENT_NAME": os.environ.get("BOXOFFICE_INITIAL_EVENT_NAME", "Evento Inicial"),
    "INITIAL_EVENT_PRICE": os.environ.get("BOXOFFICE_INITIAL_EVENT_PRICE", "5000.00"),
    "SEED_DEMO": bool(int(os.environ.get("BOXOFFICE_SEED_DEMO", 1))),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(levelname)s %(asctime)s %(module)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "boxoffice": {
            "level": os.getenv("BOXOFFICE_LOG_LEVEL", "INFO"),
        },
    },
}
