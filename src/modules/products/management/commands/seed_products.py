from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Keyboard", "Mechanical keyboard, US layout", Decimal("199.99"), 25),
    ("Mouse", "Wireless optical mouse", Decimal("49.50"), 80),
    ("Monitor", "27 inch IPS monitor", Decimal("899.00"), 12),
    ("Headset", "Over-ear headset with microphone", Decimal("129.90"), 40),
    ("Webcam", "1080p USB webcam", Decimal("79.00"), 0),
    ("Desk Lamp", "LED desk lamp", Decimal("34.90"), 60),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products (idempotent by name)."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, description, price, quantity in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": price,
                    "quantity": quantity,
                },
            )
            created += int(was_created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(CATALOG) - created} already present"
            )
        )
