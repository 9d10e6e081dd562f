from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from employee_api.core.database import get_db
from employee_api.core.errors import EmployeeValidationError
from employee_api.repositories.employees import SqlAlchemyEmployeeRepository
from employee_api.schemas.employees import EmployeeCreate, EmployeeOut
from employee_api.services.employee_service import EmployeeService
from employee_api.services.validators import validate_employee

router = APIRouter()


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(SqlAlchemyEmployeeRepository(db))


@router.get("", response_model=list[EmployeeOut])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.get_all_employees()


@router.get("/search", response_model=EmployeeOut)
def get_employee_by_phone(
    phone: str = Query(...),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.get_employee_by_phone_number(phone)


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    errors = validate_employee(payload.model_dump())
    if errors:
        raise EmployeeValidationError(errors)
    return service.create_employee(payload)
