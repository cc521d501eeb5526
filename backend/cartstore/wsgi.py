import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'cartstore.settings')

application = get_wsgi_application()

from django.conf import settings  # noqa: E402

if settings.SEED_CARTS_ON_STARTUP:
    from django.core.management import call_command  # noqa: E402

    # Every process start replaces the demo data set
    call_command('seed_carts', count=settings.SEED_CART_COUNT)
