#!/usr/bin/env python3
"""
Script to add an employee record from the command line.
Applies the same field rules as POST /api/employees.

Usage:
    python create_employee.py <name> <email> <phone>

Example:
    python create_employee.py "Jane Doe" jane@example.com 1234567890
"""

import sys
from pathlib import Path

# Add the apps/api directory to the path so we can import employee_api
api_dir = Path(__file__).parent / "apps" / "api"
sys.path.insert(0, str(api_dir))

from sqlalchemy.exc import SQLAlchemyError

from employee_api.core.config import settings
from employee_api.core.database import build_engine, build_session_factory, init_db
from employee_api.repositories.employees import SqlAlchemyEmployeeRepository
from employee_api.schemas.employees import EmployeeCreate
from employee_api.services.employee_service import EmployeeService
from employee_api.services.validators import validate_employee

def create_employee(name: str, email: str, phone: str) -> bool:
    """Validate and store one employee."""
    payload = EmployeeCreate(name=name, email=email, phone=phone)
    errors = validate_employee(payload.model_dump())
    if errors:
        for field, message in errors.items():
            print(f"❌ {field}: {message}")
        return False

    engine = build_engine(settings.database_url)
    init_db(engine)
    db = build_session_factory(engine)()
    try:
        emp = EmployeeService(SqlAlchemyEmployeeRepository(db)).create_employee(payload)

        print("✅ Employee created successfully!")
        print(f"   ID: {emp.id}")
        print(f"   Name: {emp.name}")
        print(f"   Email: {emp.email}")
        print(f"   Phone: {emp.phone}")

        return True
    except SQLAlchemyError as e:
        print(f"❌ Error creating employee: {e}")
        return False
    finally:
        db.close()
        engine.dispose()

if __name__ == "__main__":
    if len(sys.argv) != 4:
        print("Usage: python create_employee.py <name> <email> <phone>")
        print('Example: python create_employee.py "Jane Doe" jane@example.com 1234567890')
        sys.exit(1)

    success = create_employee(sys.argv[1], sys.argv[2], sys.argv[3])
    sys.exit(0 if success else 1)
