from .base import *

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Tests opt in to address search with override_settings.
GOOGLE_MAPS_API_KEY = ""

LOGGING["root"]["level"] = "CRITICAL"  # type: ignore
LOGGING["loggers"]["marketplace"]["level"] = "CRITICAL"  # type: ignore
