import io

from django.core.management import call_command
from django.test import TestCase

from core.lookups.lookup_config import DEFAULT_LOOKUPS
from core.lookups.models import LookupHeader, Lookup


class SeedLookupsCommandTests(TestCase):
    """Test the seed_lookups management command"""

    def run_command(self):
        out = io.StringIO()
        call_command('seed_lookups', stdout=out)
        return out.getvalue()

    def test_seeds_all_defaults(self):
        self.run_command()

        self.assertEqual(LookupHeader.objects.count(), len(DEFAULT_LOOKUPS))
        self.assertEqual(
            Lookup.objects.count(),
            sum(len(item['values']) for item in DEFAULT_LOOKUPS)
        )
        self.assertEqual(
            list(Lookup.get_active_for_type('service_type').values_list('value', flat=True)),
            ['DIGITIZING', 'VECTOR', 'PATCHES']
        )

    def test_idempotent_and_keeps_ids(self):
        self.run_command()
        ids_before = dict(Lookup.objects.values_list('id', 'value'))

        output = self.run_command()

        self.assertEqual(dict(Lookup.objects.values_list('id', 'value')), ids_before)
        self.assertIn('Headers: 0 created', output)
        self.assertIn('Values: 0 created', output)

    def test_adds_missing_values_only(self):
        self.run_command()
        Lookup.objects.filter(header__lookup_type='measurement_unit', value='cm').delete()

        output = self.run_command()

        self.assertTrue(Lookup.objects.filter(header__lookup_type='measurement_unit', value='cm').exists())
        self.assertIn('Values: 1 created', output)
