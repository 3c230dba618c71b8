"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with business rules
- interfaces.py: Repository contracts
"""

from .entities import Employee
from .interfaces import IEmployeeReader, IEmployeeRepository, IEmployeeWriter

__all__ = [
    # Domain entities
    "Employee",
    # Repository interfaces
    "IEmployeeRepository",
    # Segregated interfaces
    "IEmployeeReader",
    "IEmployeeWriter",
]
