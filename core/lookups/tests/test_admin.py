"""
Tests for the Django admin cache refresh hooks.
"""
from unittest import mock

from django.contrib import admin
from django.test import RequestFactory, TestCase

from core.lookups.admin import LookupAdmin, LookupHeaderAdmin
from core.lookups.models import LookupHeader, Lookup
from core.lookups.services import get_lookup_cache
from .fixtures import create_header, get_or_create_test_user


class LookupAdminRefreshTests(TestCase):

    def setUp(self):
        self.request = RequestFactory().post('/admin/')
        self.request.user = get_or_create_test_user('admin', is_staff=True)
        self.cache = get_lookup_cache()

    def tearDown(self):
        self.cache.clear_cache()

    def test_header_save_refreshes_once(self):
        header_admin = LookupHeaderAdmin(LookupHeader, admin.site)
        header = LookupHeader(lookup_type='fabric', description='Garment fabric')

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            header_admin.save_model(self.request, header, form=mock.Mock(), change=False)
            header_admin.save_related(self.request, form=mock.Mock(), formsets=[], change=False)

        self.assertEqual(len(callbacks), 1)
        self.assertIn('fabric', self.cache.get_lookup_types())

    def test_value_save_refreshes_cache(self):
        header = create_header('placement')
        value_admin = LookupAdmin(Lookup, admin.site)
        lookup = Lookup(header=header, value='Front', display_order=1)

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            value_admin.save_model(self.request, lookup, form=mock.Mock(), change=False)

        self.assertEqual(len(callbacks), 1)
        self.assertEqual(self.cache.get_lookup_id('placement', 'Front'), lookup.id)

    def test_value_delete_refreshes_cache(self):
        header = create_header('placement')
        lookup = Lookup.objects.create(header=header, value='Front')
        self.cache.refresh()
        value_admin = LookupAdmin(Lookup, admin.site)

        with self.captureOnCommitCallbacks(execute=True):
            value_admin.delete_model(self.request, lookup)

        self.assertFalse(self.cache.is_valid_lookup('placement', 'Front'))
