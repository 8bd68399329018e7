"""
Management command to seed the reference data the app needs.

Usage:
    python manage.py seed_rdm_data

This creates (skipping anything that already exists by name):
- 5 default goals
- 4 charity organizations with their allocation percentages
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.charity.models import CharityOrganization
from apps.goals.models import Goal


DEFAULT_GOALS = [
    {
        'name': '10 Minutes Meditation',
        'description': 'Practice mindfulness meditation for 10 minutes',
        'associated_tokens': 20,
    },
    {
        'name': 'Drink 2L Water',
        'description': 'Stay hydrated by drinking 2 liters of water throughout the day',
        'associated_tokens': 15,
    },
    {
        'name': 'Read 20 Pages',
        'description': 'Expand your knowledge by reading 20 pages of a book',
        'associated_tokens': 25,
    },
    {
        'name': 'Walk 5000 Steps',
        'description': 'Stay active by walking at least 5000 steps',
        'associated_tokens': 18,
    },
    {
        'name': 'Practice Gratitude',
        'description': 'Write down 3 things you are grateful for today',
        'associated_tokens': 12,
    },
]

CHARITY_ORGANIZATIONS = [
    {
        'name': 'ISKCON Foundation',
        'category': 'faith-based',
        'description': 'International Society for Krishna Consciousness - Spiritual and cultural development',
        'wallet_address': '0x1234567890ABCDEF1234567890ABCDEF12345678',
        'allocation_percentage': Decimal('40.00'),
    },
    {
        'name': 'American Cancer Society',
        'category': 'healthcare',
        'description': 'Leading organization in cancer research, patient support, and prevention',
        'wallet_address': '0x2345678901BCDEF12345678901BCDEF123456789',
        'allocation_percentage': Decimal('30.00'),
    },
    {
        'name': 'Senior Citizens Welfare',
        'category': 'elderly-care',
        'description': 'Providing care, support and dignity to elderly community members',
        'wallet_address': '0x3456789012CDEF123456789012CDEF12345678AB',
        'allocation_percentage': Decimal('20.00'),
    },
    {
        'name': 'Global Education Initiative',
        'category': 'education',
        'description': 'Ensuring quality education access for underprivileged children worldwide',
        'wallet_address': '0x456789013DEF123456789013DEF123456789ABC',
        'allocation_percentage': Decimal('10.00'),
    },
]


class Command(BaseCommand):
    help = 'Seed default goals and charity organizations'

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Seeding RDM reference data...')

        goals = self.seed_goals()
        organizations = self.seed_charities()

        self.stdout.write(self.style.SUCCESS(
            f'Done: {goals} default goal(s) and {organizations} charity organization(s) created.'
        ))

    def seed_goals(self):
        self.stdout.write('  Creating default goals...')
        created_count = 0
        for data in DEFAULT_GOALS:
            _, created = Goal.objects.get_or_create(
                name=data['name'],
                is_default=True,
                defaults={
                    'description': data['description'],
                    'associated_tokens': data['associated_tokens'],
                },
            )
            created_count += created
        return created_count

    def seed_charities(self):
        self.stdout.write('  Creating charity organizations...')
        created_count = 0
        for data in CHARITY_ORGANIZATIONS:
            _, created = CharityOrganization.objects.get_or_create(
                name=data['name'],
                defaults={**data, 'is_active': True},
            )
            created_count += created
        return created_count
