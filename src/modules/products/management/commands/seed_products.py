from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Curved monitor 49 inches", Decimal("399.00"), True),
    ("Mechanical keyboard", Decimal("89.90"), True),
    ("Wireless mouse", Decimal("25.50"), True),
    ("USB-C docking station", Decimal("149.00"), True),
    ("Noise cancelling headphones", Decimal("210.00"), False),
    ("1080p webcam", Decimal("59.99"), True),
    ("Laptop stand", Decimal("34.00"), False),
    ("External SSD 1TB", Decimal("119.00"), True),
]


class Command(BaseCommand):
    help = "Seed the products table with sample data (idempotent)."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price, availability in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, "
                f"skipped={len(SEED_PRODUCTS) - created}"
            )
        )
