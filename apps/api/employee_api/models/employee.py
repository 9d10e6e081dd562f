import uuid
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from employee_api.core.database import Base

def _new_id() -> str:
    return uuid.uuid4().hex

class Employee(Base):
    __tablename__ = "employees"

    # Insert order; never exposed over the API
    seq = Column(Integer, primary_key=True, autoincrement=True)

    id = Column(String(32), unique=True, nullable=False, default=_new_id)

    name = Column(String(40), nullable=False)
    email = Column(String, nullable=False)
    # Lookup key only; duplicates are allowed
    phone = Column(String(10), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
