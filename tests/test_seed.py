from product_api import seed
from product_api.models.product import Product
from tests.conftest import memory_database


def test_seed_loads_sample_products():
    database = memory_database()
    seed.main([], database=database)

    with database.session() as db:
        products = db.query(Product).all()
        assert len(products) == 6
        assert all(p.name and p.price > 0 for p in products)


def test_seed_clear_leaves_empty_table():
    database = memory_database()
    seed.main([], database=database)
    seed.main(["--clear"], database=database)

    with database.session() as db:
        assert db.query(Product).count() == 0
