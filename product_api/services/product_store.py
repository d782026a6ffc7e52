from decimal import Decimal

from sqlalchemy.orm import Session

from product_api.models.product import Product
from product_api.schemas.product import ProductCreate, ProductUpdate

ID_MIN = -(2 ** 31)
ID_MAX = 2 ** 31 - 1


def list_products(db: Session) -> list[Product]:
    return db.query(Product).order_by(Product.id.desc()).all()


def get_product(db: Session, product_id: int) -> Product | None:
    # Ids outside the INTEGER column range can never match a row
    if not ID_MIN <= product_id <= ID_MAX:
        return None
    return db.get(Product, product_id)


def create_product(db: Session, data: ProductCreate) -> Product:
    product = Product(
        name=data.name,
        price=Decimal(str(data.price)),
        availability=data.availability,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def update_product(db: Session, product: Product, data: ProductUpdate) -> Product:
    product.name = data.name
    product.price = Decimal(str(data.price))
    product.availability = data.availability
    db.commit()
    db.refresh(product)
    return product


def toggle_availability(db: Session, product: Product) -> Product:
    # Flips the stored value; nothing from the request is read
    product.availability = not product.availability
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product: Product) -> None:
    db.delete(product)
    db.commit()
