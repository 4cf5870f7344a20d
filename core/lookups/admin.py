from django.contrib import admin

from .models import LookupHeader, Lookup
from .services import refresh_lookup_cache_after_commit


class RefreshLookupCacheMixin:
    """Refresh the process lookup cache after admin writes commit."""

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        refresh_lookup_cache_after_commit()

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        refresh_lookup_cache_after_commit()

    def delete_queryset(self, request, queryset):
        super().delete_queryset(request, queryset)
        refresh_lookup_cache_after_commit()


class LookupInline(admin.TabularInline):
    model = Lookup
    extra = 0
    fields = ('value', 'display_order', 'is_active')


@admin.register(LookupHeader)
class LookupHeaderAdmin(RefreshLookupCacheMixin, admin.ModelAdmin):
    list_display = ['lookup_type', 'description', 'is_active']
    list_filter = ['is_active']
    search_fields = ['lookup_type']
    inlines = [LookupInline]

    def save_model(self, request, obj, form, change):
        # Inline values are saved later in save_related, refresh once after those
        admin.ModelAdmin.save_model(self, request, obj, form, change)

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        refresh_lookup_cache_after_commit()


@admin.register(Lookup)
class LookupAdmin(RefreshLookupCacheMixin, admin.ModelAdmin):
    list_display = ['value', 'header', 'display_order', 'is_active']
    list_filter = ['header', 'is_active']
    search_fields = ['value']
    ordering = ['header__lookup_type', 'display_order']
