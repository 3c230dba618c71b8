from .employee_repo import EmployeeRepository

__all__ = ["EmployeeRepository"]
