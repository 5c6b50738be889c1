from sqlmodel import Session
from storefront.core.config import Settings
from storefront.core.logging import configure_logging
from storefront.db.session import build_engine, create_db_and_tables
from storefront.db.seed import seed_items

def main():
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    with Session(engine) as session:
        seed_items(session)

if __name__ == "__main__":
    main()
