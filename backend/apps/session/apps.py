from django.apps import AppConfig


class SessionConfig(AppConfig):
    name = 'apps.session'
