"""
Lookup Tables Module

Enum-like values (service types, statuses, roles, units) stored in the
lookup_header / lookups tables, and the in-memory cache that translates
between their string values and ids.
"""

# Don't import models here - causes circular import during Django initialization
# Import them where needed instead: from core.lookups.models import Lookup
