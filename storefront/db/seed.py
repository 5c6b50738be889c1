from sqlmodel import Session, select, func
from storefront.core.logging import get_logger
from storefront.models.item import Item

logger = get_logger(__name__)

SAMPLE_ITEMS = [
    dict(
        name="MacBook Pro M2",
        description="Latest MacBook Pro with M2 chip",
        price=1299,
        category="Electronics",
        image="https://images.unsplash.com/photo-1517336714731-489689fd1ca8?w=400",
        stock=5,
    ),
    dict(
        name="iPhone 14",
        description="Latest iPhone with advanced camera",
        price=999,
        category="Electronics",
        image="https://images.unsplash.com/photo-1592750475338-74b7b21085ab?w=400",
        stock=10,
    ),
    dict(
        name="Nike Air Jordan",
        description="Classic basketball shoes",
        price=150,
        category="Clothing",
        image="https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=400",
        stock=20,
    ),
    dict(
        name="Levi's Jeans",
        description="Classic denim jeans",
        price=80,
        category="Clothing",
        image="https://images.unsplash.com/photo-1541099649105-f69ad21f3246?w=400",
        stock=15,
    ),
    dict(
        name="The Great Gatsby",
        description="Classic American novel",
        price=15,
        category="Books",
        image="https://images.unsplash.com/photo-1544947950-fa07a98d237f?w=400",
        stock=30,
    ),
    dict(
        name="Sony Headphones",
        description="Noise cancelling headphones",
        price=200,
        category="Electronics",
        image="https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400",
        stock=8,
    ),
]

def seed_items(session: Session) -> int:
    """Insert the sample catalog if there are no items yet. Returns the number inserted."""
    existing = session.exec(select(func.count()).select_from(Item)).one()
    if existing:
        logger.info("Database already contains %s items. Skipping seed.", existing)
        return 0

    for data in SAMPLE_ITEMS:
        session.add(Item(**data))
    session.commit()
    logger.info("Sample data inserted (%s items)", len(SAMPLE_ITEMS))
    return len(SAMPLE_ITEMS)
