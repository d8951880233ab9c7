from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import DATABASE_URL

# Siapkan connect_args kosong sebagai default
connect_args = {}

if DATABASE_URL.startswith("sqlite"):
    # connect_args={"check_same_thread": False} itu wajib khusus buat SQLite
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Dependency: dipanggil setiap request yang butuh DB
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
