"""Record store access for employees."""

import logging
from typing import Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]: ...

    def find_by_phone(self, phone: str) -> Optional[Employee]: ...

    def insert(self, name: str, email: str, phone: str) -> Employee: ...


class SqlAlchemyEmployeeRepository:
    """EmployeeRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Employee]:
        return list(self.db.execute(select(Employee)).scalars().all())

    def find_by_phone(self, phone: str) -> Optional[Employee]:
        # phone is not unique; the first inserted record wins
        stmt = (
            select(Employee)
            .where(Employee.phone == phone)
            .order_by(Employee.seq.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def insert(self, name: str, email: str, phone: str) -> Employee:
        emp = Employee(name=name, email=email, phone=phone)
        self.db.add(emp)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(emp)
        logger.info("Created employee %s", emp.id)
        return emp
