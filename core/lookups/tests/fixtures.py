"""
Test fixtures and helper functions for lookup tests.
"""
from django.contrib.auth import get_user_model

from core.lookups.cache import LookupEntryRecord, LookupHeaderRecord
from core.lookups.exceptions import BackingStoreUnavailable
from core.lookups.models import LookupHeader, Lookup

User = get_user_model()


SERVICE_TYPES = {1: 'DIGITIZING', 2: 'VECTOR', 3: 'PATCHES'}


class SeededLoader:
    """
    In-memory backing store for LookupCache.

    `data` maps lookup_type -> {id: value}; header ids are assigned in
    insertion order and display order follows the dict order.
    """

    def __init__(self, data=None):
        self.data = data if data is not None else {'service_type': dict(SERVICE_TYPES)}
        self.calls = 0
        self.fail = False

    def __call__(self):
        self.calls += 1
        if self.fail:
            raise BackingStoreUnavailable('database is down')

        headers = []
        entries = []
        for header_id, (lookup_type, values) in enumerate(self.data.items(), start=100):
            headers.append(LookupHeaderRecord(id=header_id, lookup_type=lookup_type))
            for order, (lookup_id, value) in enumerate(values.items(), start=1):
                entries.append(LookupEntryRecord(
                    id=lookup_id, header_id=header_id, value=value, display_order=order
                ))
        return headers, entries


def create_header(lookup_type='service_type', description='', is_active=True):
    """Create a lookup header for testing"""
    return LookupHeader.objects.create(
        lookup_type=lookup_type,
        description=description,
        is_active=is_active
    )


def create_lookup(header, value, display_order=0, is_active=True):
    """Create a lookup value for testing"""
    return Lookup.objects.create(
        header=header,
        value=value,
        display_order=display_order,
        is_active=is_active
    )


def seed_service_types():
    """Create service_type with DIGITIZING, VECTOR, PATCHES; returns (header, [lookups])"""
    header = create_header('service_type', 'Service offered')
    lookups = [
        create_lookup(header, value, display_order=order)
        for order, value in enumerate(SERVICE_TYPES.values(), start=1)
    ]
    return header, lookups


def get_or_create_test_user(username='testuser', is_staff=False):
    """Get or create a test user for tests"""
    user, created = User.objects.get_or_create(
        username=username,
        defaults={'email': f'{username}@example.com', 'is_staff': is_staff}
    )
    if created:
        user.set_password('testpass123')
        user.save()
    return user
