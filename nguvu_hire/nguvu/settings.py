# settings.py
import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

import dj_database_url


BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "unsafe-dev-secret")

# ---------- DATABASES ----------
# Postgres when DATABASE_URL is present (Render/production), local SQLite otherwise.
DATABASES = {
    'default': dj_database_url.config(
        default=os.getenv("DATABASE_URL") or f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=600,
    )
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Project pointers
ROOT_URLCONF = 'nguvu_hire.nguvu.urls'
WSGI_APPLICATION = 'nguvu_hire.nguvu.wsgi.application'


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'nguvu_hire' / 'main' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                # Project context
                'nguvu_hire.dashboard.context_processors.role_flags',
                'nguvu_hire.dashboard.context_processors.unread_notifications',
            ],
        },
    },
]

# Company metadata (for templates)
COMPANY_LEGAL_NAME = os.getenv('COMPANY_LEGAL_NAME', 'NguvuHire')

# ---------- DEBUG / LOGGING ----------
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
RENDER = os.getenv("RENDER", "") != ""                 # Render sets RENDER="true" in env

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{levelname}] {asctime} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django.request": {"handlers": ["console"], "level": "ERROR", "propagate": False},
        "django": {"handlers": ["console"], "level": "INFO"},
        "nguvu_hire": {"handlers": ["console"], "level": os.getenv("NGUVU_LOG_LEVEL", "INFO"), "propagate": False},
        "analytics": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}


# ---------- HOSTS / CSRF ----------
# Helpers to parse comma-separated env vars safely
def _csv_env(name, default):
    raw = os.getenv(name, default)
    return [h.strip() for h in raw.split(",") if h.strip()]


def _int_env(name, default):
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


ALLOWED_HOSTS = _csv_env(
    "ALLOWED_HOSTS",
    "nguvuhire.com,www.nguvuhire.com,localhost,127.0.0.1,testserver",
)

CSRF_TRUSTED_ORIGINS = _csv_env(
    "CSRF_TRUSTED_ORIGINS",
    "https://nguvuhire.com,https://www.nguvuhire.com,http://localhost,http://127.0.0.1",
)

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True


# ---------- APPS ----------
INSTALLED_APPS = [
    # local apps
    'nguvu_hire.main',
    'nguvu_hire.core',
    'nguvu_hire.profiles',
    'nguvu_hire.job_list',
    'nguvu_hire.hires',
    'nguvu_hire.dashboard',
    'nguvu_hire.ads',
    'nguvu_hire.billing',
    'nguvu_hire.verification',
    'nguvu_hire.admin_portal',

    # default Django apps
    'django.contrib.admin',
    'django.contrib.sites',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # third-party apps
    'widget_tweaks',
    'crispy_forms',
    'crispy_bootstrap4',
    'allauth',
    'allauth.account',
]

SITE_ID = 1


# ---------- MIDDLEWARE ----------
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',   # must be right after SecurityMiddleware
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'allauth.account.middleware.AccountMiddleware',
    'nguvu_hire.nguvu.security_headers.SecurityHeadersMiddleware',
    'nguvu_hire.core.middleware.pageviews.PageViewMiddleware',
]

AUTHENTICATION_BACKENDS = [
    'django.contrib.auth.backends.ModelBackend',
    'allauth.account.auth_backends.AuthenticationBackend',
]


# ---------- STATIC / MEDIA ----------
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Allow WhiteNoise to serve straight from finders when collectstatic was skipped.
WHITENOISE_USE_FINDERS = True
WHITENOISE_MANIFEST_STRICT = False

MEDIA_URL = '/media/'
MEDIA_ROOT = Path(os.getenv("MEDIA_ROOT", BASE_DIR / 'media'))

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedStaticFilesStorage"},
}


# ---------- FORMS ----------
CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap4"
CRISPY_TEMPLATE_PACK = "bootstrap4"


# ---------- EMAIL ----------
EMAIL_BACKEND = os.getenv(
    'EMAIL_BACKEND',
    'django.core.mail.backends.console.EmailBackend'
    if DEBUG else 'django.core.mail.backends.smtp.EmailBackend',
)
EMAIL_HOST = os.getenv('EMAIL_HOST', 'smtp.gmail.com')
EMAIL_PORT = int(os.getenv('EMAIL_PORT', '587'))
EMAIL_USE_TLS = os.getenv('EMAIL_USE_TLS', 'true').lower() == 'true'
EMAIL_HOST_USER = os.getenv('EMAIL_HOST_USER', 'support@nguvuhire.com')
EMAIL_HOST_PASSWORD = os.getenv('EMAIL_HOST_PASSWORD', '')
DEFAULT_FROM_EMAIL = EMAIL_HOST_USER


# ---------- SECURITY ----------
SESSION_COOKIE_SECURE = not DEBUG
CSRF_COOKIE_SECURE = not DEBUG
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SAMESITE = "Lax"
# Render terminates TLS at the proxy; only force redirects there.
SECURE_SSL_REDIRECT = RENDER
SECURE_REFERRER_POLICY = os.getenv("SECURE_REFERRER_POLICY", "strict-origin-when-cross-origin")

if RENDER:
    SECURE_HSTS_SECONDS = int(os.getenv("SECURE_HSTS_SECONDS", "31536000"))
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True
    SECURE_CONTENT_TYPE_NOSNIFF = True


# ---------- i18n ----------
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# ---------- Auth redirects ----------
LOGIN_URL = '/accounts/login/'
LOGIN_REDIRECT_URL = '/dashboard/'
LOGOUT_REDIRECT_URL = '/'

ACCOUNT_EMAIL_VERIFICATION = os.getenv("ACCOUNT_EMAIL_VERIFICATION", "none")


# ---------- Marketplace ----------
# 12 posts + up to 3 ads = 15 cards per page
NGUVU_POSTS_PER_PAGE = _int_env("NGUVU_POSTS_PER_PAGE", 12)
NGUVU_AD_INTERVAL = _int_env("NGUVU_AD_INTERVAL", 9)
NGUVU_AD_SLOTS = _int_env("NGUVU_AD_SLOTS", 3)
NGUVU_BROWSE_LIMIT = _int_env("NGUVU_BROWSE_LIMIT", 100)
NGUVU_UPLOAD_MAX_BYTES = _int_env("NGUVU_UPLOAD_MAX_BYTES", 5 * 1024 * 1024)
NGUVU_FREE_BOOST_CREDITS = _int_env("NGUVU_FREE_BOOST_CREDITS", 1)
NGUVU_PAYMENT_CURRENCY = os.getenv("NGUVU_PAYMENT_CURRENCY", "USD")
