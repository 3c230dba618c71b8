"""
Employee service for business logic.

This service:
- Keeps business rules separate from controllers and repositories
- Depends on the IEmployeeRepository abstraction, not SQLAlchemy
- Returns response projections, never database models
- Raises only domain errors (DuplicateEmailError, EmployeeNotFoundError)
"""

import logging
from typing import List, Optional

from ems.core.exceptions import (
    ConstraintViolationError,
    DuplicateEmailError,
    EmployeeNotFoundError,
)
from ems.domain.entities import Employee as DomainEmployee
from ems.domain.interfaces import IEmployeeRepository
from ems.schemas.dtos import (
    EmployeeCreateRequest,
    EmployeePatchRequest,
    EmployeeResponse,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    """Application service for employee use-cases."""

    def __init__(self, repo: IEmployeeRepository) -> None:
        self.repo = repo

    def create_employee(self, request: EmployeeCreateRequest) -> EmployeeResponse:
        """Register a new employee.

        Business Rules:
        - Email must not be registered yet
        - A uniqueness violation raised by the store (concurrent create
          with the same email) is reported the same way

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        if self.repo.get_by_email(request.email) is not None:
            logger.warning(
                "Rejected employee with duplicate email",
                extra={"context": {"email": request.email}},
            )
            raise DuplicateEmailError(request.email)

        employee = DomainEmployee(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            department_code=request.department_code,
        )
        try:
            saved = self.repo.create(employee)
        except ConstraintViolationError as e:
            logger.warning(
                "Rejected employee with duplicate email",
                extra={"context": {"email": request.email, "source": "store"}},
            )
            raise DuplicateEmailError(request.email) from e

        logger.info(
            "Employee created",
            extra={"context": {"employee_id": saved.id, "email": saved.email}},
        )
        return EmployeeResponse.from_domain(saved)

    def get_all_employees(self) -> List[EmployeeResponse]:
        """All employees in the order returned by the store."""
        return self._project(self.repo.get_all())

    def find_by_first_name(self, first_name: str) -> List[EmployeeResponse]:
        return self._project(self.repo.get_by_first_name(first_name))

    def find_by_last_name(self, last_name: str) -> List[EmployeeResponse]:
        return self._project(self.repo.get_by_last_name(last_name))

    def find_by_department_code(self, department_code: str) -> List[EmployeeResponse]:
        return self._project(self.repo.get_by_department_code(department_code))

    def find_by_email(self, email: str) -> Optional[EmployeeResponse]:
        employee = self.repo.get_by_email(email)
        return EmployeeResponse.from_domain(employee) if employee else None

    def update_employee(
        self, email: str, request: EmployeeCreateRequest
    ) -> EmployeeResponse:
        """Overwrite every field of the employee identified by ``email``.

        The path email is authoritative: the stored email is reset to
        ``email`` and ``request.email`` is ignored.

        Raises:
            EmployeeNotFoundError: If no employee has this email
        """
        employee = self._get_existing(email)

        employee.first_name = request.first_name
        employee.last_name = request.last_name
        employee.department_code = request.department_code
        employee.email = email

        saved = self.repo.save(employee)
        logger.info(
            "Employee updated",
            extra={"context": {"employee_id": saved.id, "email": email}},
        )
        return EmployeeResponse.from_domain(saved)

    def update_employee_partially(
        self, email: str, patch: EmployeePatchRequest
    ) -> EmployeeResponse:
        """Overwrite only the fields present in ``patch``.

        Raises:
            EmployeeNotFoundError: If no employee has this email
        """
        employee = self._get_existing(email)

        if patch.first_name is not None:
            employee.first_name = patch.first_name
        if patch.last_name is not None:
            employee.last_name = patch.last_name
        if patch.department_code is not None:
            employee.department_code = patch.department_code

        saved = self.repo.save(employee)
        logger.info(
            "Employee partially updated",
            extra={
                "context": {
                    "employee_id": saved.id,
                    "email": email,
                    "no_op": patch.is_empty(),
                }
            },
        )
        return EmployeeResponse.from_domain(saved)

    def delete_employee(self, email: str) -> None:
        """Delete the employee identified by ``email``.

        Raises:
            EmployeeNotFoundError: If no employee has this email
        """
        self._get_existing(email)
        removed = self.repo.delete_by_email(email)
        logger.info(
            "Employee deleted",
            extra={"context": {"email": email, "rows_removed": removed}},
        )

    def _get_existing(self, email: str) -> DomainEmployee:
        employee = self.repo.get_by_email(email)
        if employee is None:
            logger.warning(
                "Employee not found",
                extra={"context": {"email": email}},
            )
            raise EmployeeNotFoundError(email)
        return employee

    @staticmethod
    def _project(employees: List[DomainEmployee]) -> List[EmployeeResponse]:
        return [EmployeeResponse.from_domain(e) for e in employees]
