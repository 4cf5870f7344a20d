import logging

from django.apps import apps
from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Q

from .cache import LookupCache, LookupEntryRecord, LookupHeaderRecord
from .exceptions import BackingStoreUnavailable
from .models import Lookup, LookupHeader

logger = logging.getLogger(__name__)


def get_lookup_cache() -> LookupCache:
    """The lookup cache owned by this process."""
    return apps.get_app_config('lookups').cache


def refresh_lookup_cache_after_commit():
    """
    Refresh the process cache once the current transaction commits.

    The write has already committed when the callback runs, so a failed
    reload is logged and the previous snapshot stays in place.
    """
    def _refresh():
        try:
            get_lookup_cache().refresh()
        except BackingStoreUnavailable as e:
            logger.error(f"Lookup cache refresh after write failed, keeping previous data: {e}")

    transaction.on_commit(_refresh)


def load_lookup_records():
    """
    Read active headers and their active values from the database.

    Returns:
        Tuple of (headers, entries) records for LookupSnapshot.build

    Raises:
        BackingStoreUnavailable: the lookup tables could not be queried
    """
    try:
        headers = [
            LookupHeaderRecord(id=pk, lookup_type=lookup_type, description=description)
            for pk, lookup_type, description in LookupHeader.objects.filter(
                is_active=True
            ).order_by('lookup_type').values_list('id', 'lookup_type', 'description')
        ]
        entries = [
            LookupEntryRecord(id=pk, header_id=header_id, value=value, display_order=display_order)
            for pk, header_id, value, display_order in Lookup.objects.filter(
                is_active=True,
                header__is_active=True
            ).order_by('header__lookup_type', 'display_order', 'value').values_list(
                'id', 'header_id', 'value', 'display_order'
            )
        ]
    except DatabaseError as e:
        raise BackingStoreUnavailable(f"Failed to read lookup tables: {e}") from e

    return headers, entries


class LookupService:
    """
    Lookup administration and database-backed queries.

    Every write refreshes the process cache once the transaction commits.
    """

    @staticmethod
    def search_lookups(search_term):
        """
        Search active values by substring, case-insensitive.
        """
        try:
            return list(Lookup.objects.filter(
                Q(value__icontains=search_term),
                is_active=True,
                header__is_active=True
            ).select_related('header').order_by('header__lookup_type', 'display_order', 'value'))
        except DatabaseError as e:
            raise BackingStoreUnavailable(f"Failed to search lookups: {e}") from e

    @staticmethod
    @transaction.atomic
    def create_header(data):
        """Create a new lookup header"""
        header = LookupHeader.objects.create(**data)
        logger.info(f"Created lookup header {header.lookup_type}")
        refresh_lookup_cache_after_commit()
        return header

    @staticmethod
    @transaction.atomic
    def update_header(pk, data):
        """Update a lookup header"""
        header = LookupHeader.objects.get(pk=pk)
        for key, value in data.items():
            setattr(header, key, value)
        header.save()
        refresh_lookup_cache_after_commit()
        return header

    @staticmethod
    @transaction.atomic
    def delete_header(pk):
        """Delete a lookup header and its values"""
        header = LookupHeader.objects.get(pk=pk)
        logger.info(f"Deleting lookup header {header.lookup_type}")
        header.delete()
        refresh_lookup_cache_after_commit()

    @staticmethod
    @transaction.atomic
    def create_value(data):
        """Create a new lookup value"""
        lookup = Lookup.objects.create(**data)
        logger.info(f"Created lookup value {lookup}")
        refresh_lookup_cache_after_commit()
        return lookup

    @staticmethod
    @transaction.atomic
    def update_value(pk, data):
        """Update a lookup value"""
        lookup = Lookup.objects.get(pk=pk)
        for key, value in data.items():
            setattr(lookup, key, value)
        lookup.save()
        refresh_lookup_cache_after_commit()
        return lookup

    @staticmethod
    @transaction.atomic
    def delete_value(pk):
        """Delete a lookup value"""
        lookup = Lookup.objects.get(pk=pk)
        logger.info(f"Deleting lookup value {lookup}")
        lookup.delete()
        refresh_lookup_cache_after_commit()


def initialize_lookup_cache():
    """
    Load the lookup cache at application startup.

    Called from the WSGI/ASGI entry points. Errors propagate so a worker
    without lookup data fails to start instead of serving requests.
    """
    if not getattr(settings, 'LOOKUP_CACHE_AUTOLOAD', True):
        logger.info("Lookup cache autoload disabled, loading on first use")
        return
    get_lookup_cache().initialize()
