from rest_framework import serializers

from .exceptions import LookupNotFound
from .services import get_lookup_cache


class LookupField(serializers.Field):
    """
    Serializer field for a foreign key into the lookups table.

    The wire form is the lookup value (e.g. 'DIGITIZING'), the internal form
    is the lookup id. Order, quote and user serializers use this to keep the
    string enums of the API while the tables store lookup ids.

    Usage:
        class QuoteSerializer(serializers.Serializer):
            service_type = LookupField('service_type', fallback_type='order_type')
            status = LookupField('quote_status')
    """

    default_error_messages = {
        'invalid': "'{value}' is not a valid {lookup_type}. Allowed values: {allowed}",
        'incorrect_type': 'Expected a string value, got {data_type}.',
    }

    def __init__(self, lookup_type, fallback_type=None, cache=None, **kwargs):
        self.lookup_type = lookup_type
        self.fallback_type = fallback_type
        self._cache = cache
        super().__init__(**kwargs)

    @property
    def cache(self):
        return self._cache if self._cache is not None else get_lookup_cache()

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('incorrect_type', data_type=type(data).__name__)

        value = data.strip()
        try:
            return self.cache.resolve_lookup_id(self.lookup_type, value, self.fallback_type)
        except LookupNotFound:
            self.fail(
                'invalid',
                value=value,
                lookup_type=self.lookup_type,
                allowed=', '.join(self.cache.get_lookup_values(self.lookup_type))
            )

    def to_representation(self, value):
        return self.cache.get_lookup_value(value)
