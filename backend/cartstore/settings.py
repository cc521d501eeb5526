import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# ---------------------------------------------------------------------------
# SECRET KEY HANDLING
# Prefer DJANGO_SECRET_KEY, fall back to SECRET_KEY.
# In production (DEBUG=False) we require a non-default, non-empty key.
# ---------------------------------------------------------------------------
_candidate_key = (
    os.getenv('DJANGO_SECRET_KEY')
    or os.getenv('SECRET_KEY')
    or ''
)
SECRET_KEY = _candidate_key if _candidate_key else 'dev-secret-key'
DEBUG = _env_bool('DEBUG', 'True')
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', '*').split(',')

if SECRET_KEY == 'dev-secret-key' and not DEBUG:
    raise ImproperlyConfigured(
        'SECRET_KEY is missing or using insecure default. Set DJANGO_SECRET_KEY or SECRET_KEY env var.'
    )

INSTALLED_APPS = [
    'django.contrib.sessions',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'apps.common',
    'apps.api',
    'apps.carts',
    'apps.session.apps.SessionConfig',
]

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.FormParser',
    ],
    # No user accounts: every request is anonymous
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'apps.api.exceptions.global_exception_handler',
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Cart Store API',
    'DESCRIPTION': 'Demo carts kept in a Redis document store: total filtering, discounts and product search.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/api',
    'SERVE_PERMISSIONS': [],
}

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'cartstore.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'apps.session.context_processors.session_attributes',
            ],
        },
    },
]

WSGI_APPLICATION = 'cartstore.wsgi.application'

# Carts live in Redis, not in a relational database
DATABASES = {}

# ---------------------------------------------------------------------------
# Redis: documents, sessions and cache all share one instance by default.
# ---------------------------------------------------------------------------
REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/0')
DOCUMENT_STORE_URL = os.getenv('DOCUMENT_STORE_URL', REDIS_URL)
DOCUMENT_STORE_CONNECT_TIMEOUT = float(os.getenv('DOCUMENT_STORE_CONNECT_TIMEOUT', '2'))
CART_KEY_PREFIX = os.getenv('CART_KEY_PREFIX', 'cart')

SEED_CARTS_ON_STARTUP = _env_bool('SEED_CARTS_ON_STARTUP', 'True')
SEED_CART_COUNT = int(os.getenv('SEED_CART_COUNT', '10'))

CACHE_SERIALIZERS = {
    'json': 'django_redis.serializers.json.JSONSerializer',
    'pickle': 'django_redis.serializers.pickle.PickleSerializer',
    'msgpack': 'django_redis.serializers.msgpack.MSGPackSerializer',
}
# Serialisation of session data in Redis, applied by django-redis
SESSION_CACHE_SERIALIZER = os.getenv('SESSION_CACHE_SERIALIZER', 'json').lower()
if SESSION_CACHE_SERIALIZER not in CACHE_SERIALIZERS:
    raise ImproperlyConfigured(
        f"SESSION_CACHE_SERIALIZER must be one of {', '.join(sorted(CACHE_SERIALIZERS))}"
    )
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_CACHE_ALIAS = 'sessions'
SESSION_COOKIE_NAME = os.getenv('SESSION_COOKIE_NAME', 'SESSION')
SESSION_COOKIE_AGE = int(os.getenv('SESSION_COOKIE_AGE', str(30 * 60)))
SESSION_COOKIE_SECURE = _env_bool('SESSION_COOKIE_SECURE', 'False')

CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': REDIS_URL,
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
        },
        'KEY_PREFIX': os.getenv('CACHE_KEY_PREFIX', 'cartstore'),
    },
    SESSION_CACHE_ALIAS: {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': REDIS_URL,
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
            'SERIALIZER': CACHE_SERIALIZERS[SESSION_CACHE_SERIALIZER],
        },
        'KEY_PREFIX': os.getenv('SESSION_KEY_PREFIX', 'cartstore'),
        'TIMEOUT': SESSION_COOKIE_AGE,
    },
}

# Use in-memory caches under pytest so tests run without Redis
USING_PYTEST = 'pytest' in sys.modules

if 'test' in sys.argv or USING_PYTEST:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'cartstore-test-cache',
        },
        SESSION_CACHE_ALIAS: {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'cartstore-test-sessions',
            'TIMEOUT': SESSION_COOKIE_AGE,
        },
    }
    SEED_CARTS_ON_STARTUP = False

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {'format': '%(asctime)s %(levelname)s %(name)s: %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'plain'},
    },
    'root': {'handlers': ['console'], 'level': LOG_LEVEL},
    'loggers': {
        'django': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
    },
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
