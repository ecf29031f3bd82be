"""Marketplace database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load starter categories, products and skills
"""

import argparse
import sys

SEED_CATALOGUE = {
    "Electronics": [
        ("Wireless Earbuds", "Noise-isolating Bluetooth earbuds", 59.99),
        ("USB-C Hub", "Seven-port hub with HDMI and card reader", 34.5),
    ],
    "Books": [
        ("Domain-Driven Design", "Tackling complexity in the heart of software", 48.0),
    ],
}

SEED_SKILLS = ["HTML5", "CSS3", "JavaScript", "ReactJs", "NodeJs", "ExpressJs", "MongoDB", "Python"]


def _domain():
    from marketplace.domain import marketplace

    marketplace.init()
    return marketplace


def setup_database():
    from marketplace.utils.db import setup_db

    print("Initializing marketplace domain...")
    domain = _domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from marketplace.utils.db import drop_db

    print("Initializing marketplace domain...")
    domain = _domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def seed():
    """Add the starter catalogue and skills, skipping entries that already exist."""
    from marketplace.catalogue.category.category import Category
    from marketplace.catalogue.category.management import AddCategory
    from marketplace.catalogue.product.creation import AddProduct
    from marketplace.talent.skill.management import AddSkill
    from marketplace.talent.skill.skill import Skill

    domain = _domain()
    with domain.domain_context():
        categories = domain.repository_for(Category)
        for category_name, products in SEED_CATALOGUE.items():
            if categories.find_by_name(category_name) is not None:
                print(f"  category {category_name!r} exists, skipping")
                continue

            category_id = domain.process(AddCategory(name=category_name), asynchronous=False)
            for title, description, price in products:
                domain.process(
                    AddProduct(
                        category_id=category_id,
                        title=title,
                        description=description,
                        price=price,
                        availability=True,
                    ),
                    asynchronous=False,
                )
            print(f"  category {category_name!r} added with {len(products)} products")

        skills = domain.repository_for(Skill)
        added = 0
        for name in SEED_SKILLS:
            if skills.find_by_name(name) is None:
                domain.process(AddSkill(name=name), asynchronous=False)
                added += 1
        print(f"  {added} skills added")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Marketplace database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load starter categories, products and skills")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
