"""Employee repository implementation on a SQLAlchemy session.

Maps between domain entities and database models and converts storage
integrity failures into ``ConstraintViolationError``.
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from ems.core.exceptions import ConstraintViolationError
from ems.db.base import Employee as DbEmployee
from ems.domain.entities import Employee as DomainEmployee
from ems.domain.interfaces import IEmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeRepository(IEmployeeRepository):
    """Repository for Employee persistence operations.

    Every write commits its own transaction; a failed write is rolled
    back so the session stays usable and the previous state is kept.
    """

    def __init__(self, db_session) -> None:
        self.db = db_session

    def get_by_id(self, employee_id: int) -> Optional[DomainEmployee]:
        db_employee = self.db.query(DbEmployee).filter_by(id=employee_id).first()
        return self._to_domain(db_employee) if db_employee else None

    def get_by_email(self, email: str) -> Optional[DomainEmployee]:
        db_employee = self.db.query(DbEmployee).filter_by(email=email).first()
        return self._to_domain(db_employee) if db_employee else None

    def get_by_first_name(self, first_name: str) -> List[DomainEmployee]:
        return self._find_ignore_case(DbEmployee.first_name, first_name)

    def get_by_last_name(self, last_name: str) -> List[DomainEmployee]:
        return self._find_ignore_case(DbEmployee.last_name, last_name)

    def get_by_department_code(self, department_code: str) -> List[DomainEmployee]:
        return self._find_ignore_case(DbEmployee.department_code, department_code)

    def get_all(self) -> List[DomainEmployee]:
        db_employees = self.db.query(DbEmployee).all()
        return [self._to_domain(e) for e in db_employees]

    def create(self, employee: DomainEmployee) -> DomainEmployee:
        """Insert a new employee and return it with its assigned ID."""
        db_employee = DbEmployee(
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            department_code=employee.department_code,
        )
        self.db.add(db_employee)
        self._commit(employee.email)
        self.db.refresh(db_employee)
        return self._to_domain(db_employee)

    def save(self, employee: DomainEmployee) -> DomainEmployee:
        """Write all fields of an existing employee, located by ID."""
        if employee.id is None:
            return self.create(employee)

        db_employee = self.db.query(DbEmployee).filter_by(id=employee.id).first()
        if not db_employee:
            return self.create(employee)

        db_employee.first_name = employee.first_name
        db_employee.last_name = employee.last_name
        db_employee.email = employee.email
        db_employee.department_code = employee.department_code

        self.db.add(db_employee)
        self._commit(employee.email)
        self.db.refresh(db_employee)
        return self._to_domain(db_employee)

    def delete_by_email(self, email: str) -> int:
        """Delete by email. Removing zero rows is not an error."""
        removed = (
            self.db.query(DbEmployee)
            .filter_by(email=email)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed

    def _find_ignore_case(self, column, value: str) -> List[DomainEmployee]:
        db_employees = (
            self.db.query(DbEmployee).filter(func.lower(column) == value.lower()).all()
        )
        return [self._to_domain(e) for e in db_employees]

    def _commit(self, email: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                "Employee write rejected by unique constraint",
                extra={"context": {"email": email}},
            )
            raise ConstraintViolationError(
                f"Unique constraint violated for email: {email}", email=email
            ) from e

    def _to_domain(self, db_employee: DbEmployee) -> DomainEmployee:
        """Convert database model to domain entity."""
        return DomainEmployee(
            id=db_employee.id,
            first_name=db_employee.first_name,
            last_name=db_employee.last_name,
            email=db_employee.email,
            department_code=db_employee.department_code,
            created_at=db_employee.created_at,
            updated_at=db_employee.updated_at,
        )
