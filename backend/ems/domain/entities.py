"""
Domain entities - Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ems.core.exceptions import ValidationError


@dataclass
class Employee:
    """Domain entity representing an Employee.

    This is the pure business representation, independent of:
    - Database implementation (SQLAlchemy)
    - HTTP frameworks (Flask)

    ``id`` is assigned by the store and is ``None`` until the entity
    has been inserted.
    """

    first_name: str
    last_name: str
    email: str
    department_code: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate domain rules."""
        if not self.email:
            raise ValidationError("Email is required")
        if "@" not in self.email:
            raise ValidationError("Invalid email format")
