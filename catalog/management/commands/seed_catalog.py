"""Management command to seed the catalog with a demo seller, categories and products."""

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from catalog.models import Category, Product


User = get_user_model()


SELLER = {
    "email": "seller@example.com",
    "name": "Demo Seller",
    "password": "storefront-demo",
}

CATEGORIES = ["Clothing", "Electronics", "Books", "Home & Garden", "Sports"]

ADJECTIVES = ["Classic", "Compact", "Deluxe", "Everyday", "Premium", "Rustic", "Smart", "Vintage"]
NOUNS = ["Backpack", "Lamp", "Notebook", "Jacket", "Speaker", "Mug", "Sneakers", "Watch", "Chair", "Kettle"]


class Command(BaseCommand):
    help = "Seed demo categories and products"

    def add_arguments(self, parser):
        parser.add_argument("--products", type=int, default=24, help="Number of products to create")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
        parser.add_argument("--force", action="store_true", help="Delete existing products first")

    @transaction.atomic
    def handle(self, *args, **options):
        count = options["products"]
        if count < 0:
            raise CommandError("--products must be zero or more")

        rng = random.Random(options["seed"])

        seller, created = User.objects.get_or_create(
            email=SELLER["email"], defaults={"name": SELLER["name"]}
        )
        if created:
            seller.set_password(SELLER["password"])
            seller.save()
            self.stdout.write(f"  Created seller: {seller.email}")

        categories = []
        for name in CATEGORIES:
            category, _ = Category.objects.get_or_create(name=name)
            categories.append(category)

        if options["force"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"  Deleted {deleted} existing products")

        for _ in range(count):
            name = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
            Product.objects.create(
                seller=seller,
                category=rng.choice(categories),
                name=name,
                description=f"A {name.lower()} picked for the demo catalog.",
                price=Decimal(rng.randint(100, 50000)) / 100,
            )

        self.stdout.write(self.style.SUCCESS("Catalog seed complete!"))
        self.stdout.write(f"  Categories: {len(categories)}")
        self.stdout.write(f"  Products created: {count}")
