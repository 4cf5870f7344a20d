"""
Seed TP Portal Lookups

Populates lookup_header and lookups with the defaults from
core.lookups.lookup_config.

Usage:
    python manage.py seed_lookups

This is idempotent - safe to run multiple times. Existing values keep their
ids (they are referenced by other tables); only missing rows are inserted.
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, transaction
from core.lookups.models import LookupHeader, Lookup
from core.lookups.lookup_config import DEFAULT_LOOKUPS


class Command(BaseCommand):
    help = 'Seed default lookup headers and values'

    def handle(self, *args, **options):
        self.stdout.write('Seeding lookups...\n')

        headers_created = 0
        values_created = 0
        values_total = 0

        try:
            with transaction.atomic():
                for header_data in DEFAULT_LOOKUPS:
                    header, created = LookupHeader.objects.get_or_create(
                        lookup_type=header_data['lookup_type'],
                        defaults={'description': header_data['description']}
                    )
                    if created:
                        headers_created += 1
                        self.stdout.write(f"  ✓ Created header: {header.lookup_type}")
                    else:
                        self.stdout.write(f"  - Header already exists: {header.lookup_type}")

                    for order, value in enumerate(header_data['values'], start=1):
                        values_total += 1
                        _, value_created = Lookup.objects.get_or_create(
                            header=header,
                            value=value,
                            defaults={'display_order': order}
                        )
                        if value_created:
                            values_created += 1
        except DatabaseError as e:
            raise CommandError(f'Failed to seed lookups: {e}')

        self.stdout.write(self.style.SUCCESS(
            f"\n✓ Headers: {headers_created} created, {len(DEFAULT_LOOKUPS) - headers_created} already existed"
        ))
        self.stdout.write(self.style.SUCCESS(
            f"✓ Values: {values_created} created, {values_total - values_created} already existed"
        ))
