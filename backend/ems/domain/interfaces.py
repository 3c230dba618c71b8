"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Employee


class IEmployeeReader(ABC):
    """Interface for employee read operations."""

    @abstractmethod
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by store-assigned ID."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Employee]:
        """Get employee by exact email."""
        pass

    @abstractmethod
    def get_by_first_name(self, first_name: str) -> List[Employee]:
        """Get employees whose first name matches, ignoring case."""
        pass

    @abstractmethod
    def get_by_last_name(self, last_name: str) -> List[Employee]:
        """Get employees whose last name matches, ignoring case."""
        pass

    @abstractmethod
    def get_by_department_code(self, department_code: str) -> List[Employee]:
        """Get employees whose department code matches, ignoring case."""
        pass

    @abstractmethod
    def get_all(self) -> List[Employee]:
        """Get every employee in store order."""
        pass


class IEmployeeWriter(ABC):
    """Interface for employee write operations."""

    @abstractmethod
    def create(self, employee: Employee) -> Employee:
        """Insert a new employee.

        Raises:
            ConstraintViolationError: If the email is already stored.
        """
        pass

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Persist an existing employee by ID (insert when it has none)."""
        pass

    @abstractmethod
    def delete_by_email(self, email: str) -> int:
        """Delete by email and return the number of rows removed (0 or 1)."""
        pass


class IEmployeeRepository(IEmployeeReader, IEmployeeWriter):
    """Complete employee repository interface combining read/write operations."""

    pass
