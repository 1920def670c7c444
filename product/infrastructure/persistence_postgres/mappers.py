"""ORM to Domain Mappers."""

from product.domain.entities import Product
from product.domain.enums import ProductType
from product.infrastructure.persistence_postgres.models import ProductModel


def product_model_to_entity(model: ProductModel) -> Product:
    """ProductModel을 Product 엔티티로 변환합니다."""
    return Product(
        id=model.id,
        name=model.name,
        description=model.description,
        price=model.price,
        size=model.size,
        weight=model.weight,
        color=model.color,
        image_url=model.image_url,
        rating=model.rating,
        product_type=ProductType.from_value(model.product_type),
        specifications=dict(model.specifications) if model.specifications else {},
    )
