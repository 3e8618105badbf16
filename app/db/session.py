import logging
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.core import config


def build_engine(url: str, **kwargs) -> Engine:
    is_sqlite = url.startswith("sqlite")

    connect_args = kwargs.pop("connect_args", {})
    if is_sqlite:
        connect_args.setdefault("check_same_thread", False)
    elif config.DB_SSL and url.startswith("postgresql"):
        # certificate is not verified
        connect_args.setdefault("sslmode", "require")

    if not is_sqlite:
        kwargs.setdefault("pool_size", config.DB_POOL_SIZE)
        kwargs.setdefault("max_overflow", config.DB_MAX_OVERFLOW)

    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True, **kwargs)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_con, con_record):
            cur = dbapi_con.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.close()

    return engine


# Setup SQLAlchemy engine
engine = build_engine(config.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def log_database_version(bind: Engine) -> None:
    query = "SELECT sqlite_version()" if bind.dialect.name == "sqlite" else "SELECT version()"
    with bind.connect() as conn:
        version = conn.execute(text(query)).scalar()
    logging.info(f"Connected to {bind.dialect.name}: {version}")
