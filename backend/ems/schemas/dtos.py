"""
Data Transfer Objects (DTOs) and validation schemas.

JSON payloads use camelCase keys (``firstName``, ``lastName``, ``email``,
``departmentCode``); the Python side uses snake_case attributes.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ems.core.exceptions import ValidationError

_FIELD_KEYS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "department_code": "departmentCode",
}


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _optional_string(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


@dataclass
class EmployeeCreateRequest:
    """DTO for employee creation and full-update requests."""

    first_name: str
    last_name: str
    email: str
    department_code: str

    @classmethod
    def from_json(cls, payload: Any) -> "EmployeeCreateRequest":
        """Build and validate a request from a decoded JSON body."""
        data = _require_object(payload)
        values = {
            attr: _optional_string(data, key) for attr, key in _FIELD_KEYS.items()
        }
        missing = [_FIELD_KEYS[attr] for attr, v in values.items() if v is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        request = cls(**values)
        request.validate()
        return request

    def validate(self) -> None:
        """Validate the request data."""
        for attr in ("first_name", "last_name", "department_code"):
            if not getattr(self, attr).strip():
                raise ValidationError(f"{_FIELD_KEYS[attr]} must not be blank")
        if not self.email.strip() or "@" not in self.email:
            raise ValidationError("Valid email is required")


@dataclass
class EmployeePatchRequest:
    """DTO for partial updates.

    ``None`` means the field was omitted and is left unchanged. An empty
    string is a real value and overwrites the stored one. Email is never
    patched.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    department_code: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any) -> "EmployeePatchRequest":
        data = _require_object(payload)
        return cls(
            first_name=_optional_string(data, "firstName"),
            last_name=_optional_string(data, "lastName"),
            department_code=_optional_string(data, "departmentCode"),
        )

    def is_empty(self) -> bool:
        return (
            self.first_name is None
            and self.last_name is None
            and self.department_code is None
        )


@dataclass
class EmployeeResponse:
    """DTO for employee API responses.

    Deliberately carries neither the ID nor the email.
    """

    first_name: str
    last_name: str
    department_code: str

    @classmethod
    def from_domain(cls, employee) -> "EmployeeResponse":
        """Create response from domain entity."""
        return cls(
            first_name=employee.first_name,
            last_name=employee.last_name,
            department_code=employee.department_code,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "departmentCode": self.department_code,
        }
