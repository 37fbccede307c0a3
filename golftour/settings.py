import os
import structlog
import sys

from corsheaders.defaults import default_headers
from dotenv import load_dotenv


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_DIR = os.path.join(BASE_DIR, 'var/log')
DATA_DIR = os.path.join(BASE_DIR, 'var/data')

os.makedirs(LOG_DIR, exist_ok=True)
os.makedirs(DATA_DIR, exist_ok=True)

# Load Environment variables, defaulting to local, where
# we don't inject DJANGO_ENV.
DJANGO_ENV = os.getenv("DJANGO_ENV", "local")
ENVIRONMENTS = {
  "local": ".env.local",
  "docker": ".env.docker",
}

sys.stdout.write(f"Loading environment {DJANGO_ENV}\n")
dotenv_path = os.path.join(BASE_DIR, "config", ENVIRONMENTS.get(DJANGO_ENV) or ".env")

sys.stdout.write(f"Loading environment variables from {dotenv_path}\n")
load_dotenv(dotenv_path)

# Secrets
SECRET_KEY = os.getenv("SECRET_KEY", "golftour-insecure-development-key")

# Other common settings that vary by environment
allowed_hosts = os.getenv("ALLOWED_HOSTS")
if allowed_hosts is not None:
  ALLOWED_HOSTS = list(allowed_hosts.split(","))

trusted_origins = os.getenv("CSRF_TRUSTED_ORIGINS")
if trusted_origins is not None:
  CSRF_TRUSTED_ORIGINS = list(trusted_origins.split(","))

allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins is not None:
  CORS_ALLOWED_ORIGINS = list(allowed_origins.split(","))

CORS_ALLOW_HEADERS = (
    *default_headers,
    "x-correlation-id",
)

DEBUG = os.getenv("DEBUG", "False").lower() == "true"
SECURE_SSL_REDIRECT = os.getenv("SECURE_SSL_REDIRECT", "False").lower() == "true"
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "False").lower() == "true"
CSRF_COOKIE_SECURE = os.getenv("CSRF_COOKIE_SECURE", "False").lower() == "true"
CORS_ALLOW_CREDENTIALS = True

# Common settings
DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

ROOT_URLCONF = "golftour.urls"

WSGI_APPLICATION = "golftour.wsgi.application"

LANGUAGE_CODE = "en-us"

TIME_ZONE = os.getenv("TIME_ZONE", "America/Chicago")

USE_I18N = False

USE_TZ = True

INSTALLED_APPS = (
    "corsheaders",
    "django.contrib.contenttypes",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_structlog",
    "rest_framework",
    "rest_framework.authtoken",
    "simple_history",
    "core",
    "courses",
    "players",
    "points",
    "scores",
    "tours",
)

MIDDLEWARE = (
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "simple_history.middleware.HistoryRequestMiddleware",
    "django_structlog.middlewares.RequestMiddleware",
)

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticatedOrReadOnly",),
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.TokenAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ),
    "EXCEPTION_HANDLER": "core.exception_handler.custom_exception_handler",
}

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json_formatter": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
        },
        "plain_console": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(),
        },
        "key_value": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.KeyValueRenderer(key_order=['timestamp', 'level', 'event', 'logger']),
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain_console",
        },
        "flat_line_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": LOG_DIR + "/golftour.log",
            "when": "W5",
            "backupCount": 12,
            "formatter": "key_value",
        },
        "celery_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": LOG_DIR + "/celery.log",
            "when": "W5",
            "backupCount": 12,
            "formatter": "key_value",
        },
    },
    "loggers": {
        "django_structlog": {
            "handlers": ["console", "flat_line_file"],
            "level": "ERROR",
        },
        "celery": {
            "handlers": ["console", "celery_file"],
            "level": "INFO",
        },
        "core": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
        "points": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
        "scores": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
        "tours": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
    }
}

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

DJANGO_STRUCTLOG_CELERY_ENABLED = True

# Database
if os.getenv("DATABASE_NAME"):
    DATABASES = {
        'default': {
            'ENGINE': os.getenv("DATABASE_ENGINE", 'django.db.backends.postgresql'),
            'NAME': os.getenv("DATABASE_NAME"),
            'USER': os.getenv("DATABASE_USER"),
            'PASSWORD': os.getenv("DATABASE_PASSWORD"),
            'HOST': os.getenv("DATABASE_HOST"),
            'PORT': os.getenv("DATABASE_PORT"),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(DATA_DIR, "golftour.sqlite3"),
        }
    }

# Caching
REDIS_URL = os.getenv("REDIS_URL")
if REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": REDIS_URL,
        },
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        },
    }

# Celery
CELERY_BROKER_URL = REDIS_URL or "memory://"
CELERY_RESULT_BACKEND = REDIS_URL
CELERY_TIMEZONE = TIME_ZONE
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_TASK_TRACK_STARTED = True
CELERY_TASK_ALWAYS_EAGER = os.getenv("CELERY_TASK_ALWAYS_EAGER", "False").lower() == "true"

STATIC_URL = "static/"
STATIC_ROOT = os.path.join(BASE_DIR, "var/static")
