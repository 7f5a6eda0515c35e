"""
Django settings for the hello_graphql project.

Every value that differs between machines can be overridden through
environment variables; the defaults run the server on port 9000 with
the GraphiQL IDE enabled.
"""
import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-hello-graphql-development-key",
)

DEBUG = env_bool("DJANGO_DEBUG", True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]


INSTALLED_APPS = [
    # greeting must precede staticfiles so its runserver command wins.
    "greeting",
    "django.contrib.staticfiles",
    "graphene_django",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "hello_graphql.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "hello_graphql.wsgi.application"


# No models; live-server tests still need a backend for their test database.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}


STATIC_URL = "static/"


GRAPHENE = {
    "SCHEMA": "hello_graphql.schema.schema",
    "TESTING_ENDPOINT": "/",
}

GRAPHIQL = env_bool("HELLO_GRAPHQL_GRAPHIQL", True)

GREETING_SERVER_PORT = int(os.environ.get("HELLO_GRAPHQL_PORT", "9000"))

GREETING_API_URL = os.environ.get(
    "HELLO_GRAPHQL_API_URL",
    f"http://localhost:{GREETING_SERVER_PORT}/",
)


LOG_LEVEL = os.environ.get("HELLO_GRAPHQL_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
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
            "level": "INFO",
            "propagate": False,
        },
        "greeting": {
            "level": LOG_LEVEL,
        },
    },
}
