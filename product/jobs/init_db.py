"""Initialize database schema (and optionally sample catalog) for product service.

Usage:
    python -m product.jobs.init_db [--seed]
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from decimal import Decimal
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from product.domain.enums import ProductType
from product.infrastructure.persistence_postgres.base import Base
from product.infrastructure.persistence_postgres.models import ProductModel
from product.setup.config import get_settings

SAMPLE_PRODUCTS: list[dict[str, Any]] = [
    {
        "name": "Smartphone Alpha X1",
        "description": "Smartphone with AMOLED display and 108MP camera.",
        "price": Decimal("449.99"),
        "size": '6.2"',
        "weight": "180g",
        "color": "Black",
        "image_url": "https://example.com/img/alpha-x1.png",
        "rating": Decimal("4.50"),
        "product_type": ProductType.SMARTPHONE.value,
        "specifications": {
            "batteryCapacityMah": 5000,
            "cameraSpecs": "108MP main, 12MP ultra wide, 8MP tele",
            "memoryGb": 8,
            "storageGb": 128,
            "brand": "Alpha",
            "modelVersion": "X1",
            "operatingSystem": "Android 14",
        },
    },
    {
        "name": "Smartphone Beta Pro",
        "description": "Flagship smartphone with 120Hz display.",
        "price": Decimal("599.99"),
        "size": '6.7"',
        "weight": "205g",
        "color": "Silver",
        "image_url": "https://example.com/img/beta-pro.png",
        "rating": Decimal("4.70"),
        "product_type": ProductType.SMARTPHONE.value,
        "specifications": {
            "batteryCapacityMah": 4800,
            "cameraSpecs": "50MP main, 48MP ultra wide, 12MP periscope",
            "memoryGb": 12,
            "storageGb": 256,
            "brand": "Beta",
            "modelVersion": "Pro",
            "operatingSystem": "Android 14",
        },
    },
    {
        "name": "Wireless Headphones",
        "description": "Over-ear headphones with active noise cancelling.",
        "price": Decimal("129.90"),
        "size": "One size",
        "weight": "250g",
        "color": "White",
        "image_url": "https://example.com/img/headphones.png",
        "rating": Decimal("4.20"),
        "product_type": ProductType.GENERIC.value,
        "specifications": {},
    },
]


async def seed_products(engine: AsyncEngine) -> int:
    """테이블이 비어 있을 때만 샘플 상품을 넣습니다.

    Returns:
        추가된 상품 수
    """
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        count = await session.scalar(select(func.count()).select_from(ProductModel))
        if count:
            print(f"ℹ️  products already has {count} row(s); skipping seed.")
            return 0

        session.add_all(ProductModel(**data) for data in SAMPLE_PRODUCTS)
        await session.commit()
    return len(SAMPLE_PRODUCTS)


async def init_db(seed: bool = False) -> int:
    """Create tables and optionally seed sample products."""
    settings = get_settings()
    print(
        "🔗 Connecting to database: "
        f"{settings.database_url.split('@')[1] if '@' in settings.database_url else 'database'}"
    )

    engine = create_async_engine(settings.database_url, echo=False)

    try:
        print("📦 Creating database tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        if seed:
            print("🌱 Seeding sample products...")
            added = await seed_products(engine)
            print(f"   ✅ {added} product(s) added")

        print("✅ Database initialization completed!")
        return 0
    except Exception as exc:  # pragma: no cover - diagnostic output
        print(f"❌ Error initializing database: {exc}")
        import traceback

        traceback.print_exc()
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize product database")
    parser.add_argument("--seed", action="store_true", help="insert sample products")
    args = parser.parse_args()

    exit_code = asyncio.run(init_db(seed=args.seed))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
