from .dtos import EmployeeCreateRequest, EmployeePatchRequest, EmployeeResponse

__all__ = ["EmployeeCreateRequest", "EmployeePatchRequest", "EmployeeResponse"]
