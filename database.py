import os
from sqlalchemy import create_engine, CheckConstraint, Column, Integer, String, Float
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Database Setup
DB_URL = os.getenv("DATABASE_URL", "sqlite:///finance.db")


def make_engine(url: str):
    return create_engine(url, connect_args={"check_same_thread": False} if "sqlite" in url else {})


engine = make_engine(DB_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# --- Models ---

class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transactions_type"),
        # AUTOINCREMENT so deleted ids are never handed out again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String, nullable=False)
    category = Column(String)
    amount = Column(Float)
    date = Column(String, index=True)  # ISO date, stored as given
    description = Column(String)


# --- Init DB ---
def init_db(bind=None):
    Base.metadata.create_all(bind=bind if bind is not None else engine)
