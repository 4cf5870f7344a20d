"""
Lookup cache errors.

LookupNotFound is a data-integrity problem (an unknown type/value/id pair),
never a transient condition. BackingStoreUnavailable is only raised while
(re)loading the cache from the database.
"""


class LookupCacheError(Exception):
    """Base class for lookup cache failures."""


class LookupNotFound(LookupCacheError, KeyError):
    """Requested lookup type/value pair or id is not in the cache."""

    def __init__(self, message, lookup_type=None, value=None, lookup_id=None):
        super().__init__(message)
        self.message = message
        self.lookup_type = lookup_type
        self.value = value
        self.lookup_id = lookup_id

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.message


class BackingStoreUnavailable(LookupCacheError):
    """The lookup tables could not be read."""
