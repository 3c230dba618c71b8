from .employee_controller import employee_bp

__all__ = ["employee_bp"]
