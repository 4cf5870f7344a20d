"""
Tests for LookupField, the serializer field consumer endpoints use to
translate wire-level strings to lookup ids.
"""
from django.test import SimpleTestCase
from rest_framework import serializers

from core.lookups.cache import LookupCache
from core.lookups.exceptions import LookupNotFound
from core.lookups.fields import LookupField
from .fixtures import SeededLoader


def build_cache():
    cache = LookupCache(loader=SeededLoader({
        'service_type': {1: 'DIGITIZING', 2: 'VECTOR', 3: 'PATCHES'},
        'order_type': {40: 'LEGACY_DIGITIZING'},
        'quote_status': {10: 'PENDING', 11: 'PRICED'},
    }))
    cache.initialize()
    return cache


class LookupFieldTests(SimpleTestCase):

    def setUp(self):
        self.cache = build_cache()
        self.field = LookupField('service_type', cache=self.cache)

    def test_value_to_id(self):
        self.assertEqual(self.field.run_validation('VECTOR'), 2)

    def test_strips_whitespace(self):
        self.assertEqual(self.field.run_validation('  PATCHES '), 3)

    def test_id_to_value(self):
        self.assertEqual(self.field.to_representation(1), 'DIGITIZING')

    def test_unknown_value_lists_allowed_values(self):
        with self.assertRaises(serializers.ValidationError) as ctx:
            self.field.run_validation('EMBROIDERY')

        message = str(ctx.exception.detail[0])
        self.assertIn("'EMBROIDERY' is not a valid service_type", message)
        self.assertIn('DIGITIZING, VECTOR, PATCHES', message)

    def test_non_string_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            self.field.run_validation(2)

    def test_fallback_type(self):
        field = LookupField('service_type', fallback_type='order_type', cache=self.cache)
        self.assertEqual(field.run_validation('LEGACY_DIGITIZING'), 40)
        self.assertEqual(field.run_validation('VECTOR'), 2)

    def test_unknown_id_in_representation(self):
        with self.assertRaises(LookupNotFound):
            self.field.to_representation(999)


class LookupFieldSerializerTests(SimpleTestCase):
    """LookupField inside a quote-like serializer"""

    def setUp(self):
        cache = build_cache()

        class QuoteSerializer(serializers.Serializer):
            title = serializers.CharField()
            service_type = LookupField('service_type', fallback_type='order_type', cache=cache)
            status = LookupField('quote_status', cache=cache)

        self.serializer_class = QuoteSerializer

    def test_validated_data_holds_ids(self):
        serializer = self.serializer_class(data={
            'title': 'Cap logo',
            'service_type': 'DIGITIZING',
            'status': 'PENDING',
        })

        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data['service_type'], 1)
        self.assertEqual(serializer.validated_data['status'], 10)

    def test_invalid_value_reported_per_field(self):
        serializer = self.serializer_class(data={
            'title': 'Cap logo',
            'service_type': 'DIGITIZING',
            'status': 'SHIPPED',
        })

        self.assertFalse(serializer.is_valid())
        self.assertIn('status', serializer.errors)
        self.assertNotIn('service_type', serializer.errors)

    def test_representation_uses_values(self):
        quote = {'title': 'Cap logo', 'service_type': 2, 'status': 11}

        data = self.serializer_class(quote).data

        self.assertEqual(data['service_type'], 'VECTOR')
        self.assertEqual(data['status'], 'PRICED')
