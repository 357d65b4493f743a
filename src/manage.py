"""Storefront management CLI.

Creates and drops the database schema and seeds a demo catalogue with an
administrator account.

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py seed --admin-email admin@example.com --admin-password secret123
"""

import argparse
import os
import sys

import structlog

logger = structlog.get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Kiaat Upholstered Headboard",
        "description": "Solid kiaat frame with a linen-upholstered panel.",
        "price": 4500.0,
        "category": "headboards",
        "material": "Kiaat",
        "dimensions": "160cm x 120cm",
        "stock": 4,
    },
    {
        "name": "Oak Farmhouse Dining Table",
        "description": "Seats eight. Oiled European oak.",
        "price": 12800.0,
        "category": "tables",
        "material": "Oak",
        "dimensions": "220cm x 95cm x 76cm",
        "stock": 2,
    },
    {
        "name": "Riempie Bench",
        "description": "Traditional riempie seat on a stinkwood frame.",
        "price": 1850.0,
        "category": "seating",
        "material": "Stinkwood",
        "dimensions": "120cm x 40cm x 45cm",
        "stock": 10,
    },
    {
        "name": "Pine Blanket Chest",
        "description": "Hand-planed pine chest with brass fittings.",
        "price": 3200.0,
        "category": "storage",
        "material": "Pine",
        "dimensions": "100cm x 50cm x 55cm",
        "stock": 6,
    },
]


def _domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed(admin_name, admin_email, admin_password):
    """Create the first administrator and a small demo catalogue."""
    from storefront.catalogue.product.management import AddProduct
    from storefront.identity.account.queries import find_account_by_email
    from storefront.identity.account.registration import CreateAdmin
    from storefront.identity.auth.passwords import hash_password
    from storefront.inventory.stock.management import SetStockLevel

    domain = _domain()
    with domain.domain_context():
        if find_account_by_email(admin_email) is None:
            domain.process(
                CreateAdmin(name=admin_name, email=admin_email, password_hash=hash_password(admin_password)),
                asynchronous=False,
            )
            print(f"Admin account {admin_email} created.")
        else:
            print(f"Admin account {admin_email} already exists.")

        for product in DEMO_PRODUCTS:
            details = {k: v for k, v in product.items() if k != "stock"}
            product_id = domain.process(AddProduct(**details), asynchronous=False)
            domain.process(SetStockLevel(product_id=product_id, quantity=product["stock"]), asynchronous=False)
            logger.info("Seeded product", product_id=product_id, name=product["name"])
        print(f"Seeded {len(DEMO_PRODUCTS)} products.")


def main():
    parser = argparse.ArgumentParser(description="Uncommon Room storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Create an admin account and demo products")
    seed_parser.add_argument("--admin-name", default="Store Admin")
    seed_parser.add_argument("--admin-email", default=os.getenv("ADMIN_EMAIL", "admin@uncommonroom.co.za"))
    seed_parser.add_argument("--admin-password", default=os.getenv("ADMIN_PASSWORD"))

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        if not args.admin_password:
            parser.error("--admin-password (or ADMIN_PASSWORD) is required")
        seed(args.admin_name, args.admin_email, args.admin_password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
