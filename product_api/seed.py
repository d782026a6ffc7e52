import argparse
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from product_api.core import config
from product_api.core.db import Database
from product_api.core.log import configure_logging
from product_api.models.product import Product

logger = logging.getLogger(__name__)


def reset_db(database: Database):
    # Drops & recreates all tables
    database.drop_all()
    database.create_all()


def seed_products(db: Session):
    products = [
        Product(name="Curved monitor 24 inches", price=Decimal("300.00"), availability=True),
        Product(name="Mechanical keyboard", price=Decimal("89.90"), availability=True),
        Product(name="Wireless mouse", price=Decimal("25.50"), availability=True),
        Product(name="USB-C docking station", price=Decimal("149.00"), availability=False),
        Product(name="Noise cancelling headphones", price=Decimal("199.99"), availability=True),
        Product(name="27 inch 4K monitor", price=Decimal("449.00"), availability=False),
    ]
    db.add_all(products)
    return products


def main(argv: list[str] | None = None, database: Database | None = None):
    parser = argparse.ArgumentParser(description="Reset the products database")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="only drop and recreate the tables, without sample products",
    )
    args = parser.parse_args(argv)

    configure_logging(config.settings.LOG_LEVEL)
    database = database or Database.from_settings(config.settings)

    reset_db(database)
    if args.clear:
        logger.info("Database cleared")
        return

    db = database.session()
    try:
        products = seed_products(db)
        db.commit()
        logger.info("Seeded %d products", len(products))
    finally:
        db.close()


if __name__ == "__main__":
    main()
