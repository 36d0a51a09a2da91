import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("SOLAR_SECRET_KEY", "insecure-secret-key")
DEBUG = os.getenv("SOLAR_DEBUG", "1") == "1"
ALLOWED_HOSTS = [h for h in os.getenv("SOLAR_ALLOWED_HOSTS", "").split(",") if h]

INSTALLED_APPS = [
    "solar_calendar.apps.SolarCalendarConfig",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "solar_portal.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "solar_calendar.context_processors.solar_today",
            ],
        },
    },
]

WSGI_APPLICATION = "solar_portal.wsgi.application"

# SQLite path outside the repo unless SOLAR_DB_PATH says otherwise.
SOLAR_DB_PATH = os.getenv("SOLAR_DB_PATH")
if SOLAR_DB_PATH:
    DB_DEFAULT_PATH = Path(SOLAR_DB_PATH)
else:
    DB_DEFAULT_PATH = Path.home() / "solar_data" / "db_dev.sqlite3"
    DB_DEFAULT_PATH.parent.mkdir(parents=True, exist_ok=True)

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(DB_DEFAULT_PATH),
        "OPTIONS": {"timeout": 20},
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
# "Today" in the Solar calendar is the local date in this zone.
TIME_ZONE = os.getenv("SOLAR_TIME_ZONE", "America/New_York")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DATE_INPUT_FORMATS": [
        "%Y-%m-%d",
        "%d-%m-%Y",
    ],
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "solar_calendar": {
            "handlers": ["console"],
            "level": os.getenv("SOLAR_LOG_LEVEL", "INFO"),
        },
    },
}

# Solar calendar
SOLAR_WEBSITE_URL = os.getenv("SOLAR_WEBSITE_URL", "https://solar-calendar.com")
