import logging
from typing import Sequence

from employee_api.core.errors import EmployeeNotFoundError
from employee_api.models.employee import Employee
from employee_api.repositories.employees import EmployeeRepository
from employee_api.schemas.employees import EmployeeCreate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Business rules on top of an EmployeeRepository.

    Input is expected to be validated already (see services.validators).
    """

    def __init__(self, repo: EmployeeRepository):
        self.repo = repo

    def get_all_employees(self) -> Sequence[Employee]:
        return self.repo.list_all()

    def get_employee_by_phone_number(self, phone: str) -> Employee:
        emp = self.repo.find_by_phone(phone)
        if emp is None:
            logger.info("No employee with phone %s", phone)
            raise EmployeeNotFoundError(phone)
        return emp

    def create_employee(self, payload: EmployeeCreate) -> Employee:
        return self.repo.insert(name=payload.name, email=payload.email, phone=payload.phone)
