from django.apps import AppConfig


class LookupsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.lookups'
    label = 'lookups'
    verbose_name = 'Lookups'

    def ready(self):
        # Built here, loaded at WSGI/ASGI startup (no queries during app loading)
        from .cache import LookupCache
        from .services import load_lookup_records

        self.cache = LookupCache(loader=load_lookup_records)
