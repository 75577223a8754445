"""
Management command to import a legacy localStorage dump.

Usage:
    python manage.py import_local_storage dump.json --username alice

The dump is a JSON object keyed by the old localStorage keys (projects,
categories, employees, landlords, customers, incomes, customerPayments,
expenses), each holding a list of records.
"""

import json

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import User
from apps.core.legacy_import import LocalStorageImporter


class Command(BaseCommand):
    help = 'Import data exported from the browser-only version of the app'

    def add_arguments(self, parser):
        parser.add_argument('dump', help='Path to the JSON dump')
        parser.add_argument(
            '--username',
            required=True,
            help='User who will own the imported records',
        )

    def handle(self, *args, **options):
        try:
            owner = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['username']}' does not exist")

        try:
            with open(options['dump'], encoding='utf-8') as fh:
                dump = json.load(fh)
        except (OSError, ValueError) as e:
            raise CommandError(f"Cannot read {options['dump']}: {e}")
        if not isinstance(dump, dict):
            raise CommandError('The dump must be a JSON object keyed by localStorage key')

        self.stdout.write(f"Importing for {owner.username}...")
        report = LocalStorageImporter(owner=owner).run(dump)

        for key, count in report['counts'].items():
            self.stdout.write(f"  {key}: {count}")

        if report['errors']:
            self.stdout.write(self.style.WARNING(f"{len(report['errors'])} records skipped:"))
            for error in report['errors']:
                self.stdout.write(f"  {error}")
        else:
            self.stdout.write(self.style.SUCCESS('Import completed successfully!'))
