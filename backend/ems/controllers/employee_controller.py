"""
Employee controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only (parsing, status codes, JSON)
- Builds the service per request on a fresh database session
- Leaves domain errors to the application-level error handlers
"""

from contextlib import contextmanager
from typing import Iterator

from flask import Blueprint, jsonify, request

from ems.core.api_utils import api_error
from ems.core.exceptions import ValidationError
from ems.db.session import SessionLocal
from ems.repositories.employee_repo import EmployeeRepository
from ems.schemas.dtos import EmployeeCreateRequest, EmployeePatchRequest
from ems.services.employee_service import EmployeeService

employee_bp = Blueprint("employees", __name__, url_prefix="/api/v1/employees")

SEARCH_FILTERS = ("firstName", "lastName", "departmentCode")


@contextmanager
def employee_service() -> Iterator[EmployeeService]:
    """Yield an EmployeeService bound to a session closed on exit."""
    db = SessionLocal()
    try:
        yield EmployeeService(EmployeeRepository(db))
    finally:
        db.close()


def _json_body():
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Request body must be a JSON object")
    return payload


@employee_bp.route("", methods=["POST"])
def create_employee():
    """Create an employee; 201 with the projection."""
    employee_request = EmployeeCreateRequest.from_json(_json_body())
    with employee_service() as service:
        created = service.create_employee(employee_request)
    return jsonify(created.to_dict()), 201


@employee_bp.route("", methods=["GET"])
def list_employees():
    with employee_service() as service:
        employees = service.get_all_employees()
    return jsonify([e.to_dict() for e in employees]), 200


@employee_bp.route("/search", methods=["GET"])
def search_employees():
    """Case-insensitive search by exactly one of firstName, lastName, departmentCode."""
    given = {k: request.args[k] for k in SEARCH_FILTERS if k in request.args}
    if len(given) != 1:
        raise ValidationError(
            f"Provide exactly one search parameter: {', '.join(SEARCH_FILTERS)}"
        )
    field, value = next(iter(given.items()))

    with employee_service() as service:
        if field == "firstName":
            employees = service.find_by_first_name(value)
        elif field == "lastName":
            employees = service.find_by_last_name(value)
        else:
            employees = service.find_by_department_code(value)
    return jsonify([e.to_dict() for e in employees]), 200


@employee_bp.route("/<string:email>", methods=["GET"])
def get_employee(email: str):
    with employee_service() as service:
        employee = service.find_by_email(email)
    if employee is None:
        return api_error(f"Employee not found with email: {email}", 404)
    return jsonify(employee.to_dict()), 200


@employee_bp.route("/<string:email>", methods=["PATCH"])
def update_employee_partially(email: str):
    patch = EmployeePatchRequest.from_json(_json_body())
    with employee_service() as service:
        updated = service.update_employee_partially(email, patch)
    return jsonify(updated.to_dict()), 200


@employee_bp.route("/<string:email>", methods=["PUT"])
def update_employee(email: str):
    """Full update; the path email wins over any email in the body."""
    employee_request = EmployeeCreateRequest.from_json(_json_body())
    with employee_service() as service:
        updated = service.update_employee(email, employee_request)
    return jsonify(updated.to_dict()), 200


@employee_bp.route("/<string:email>", methods=["DELETE"])
def delete_employee(email: str):
    with employee_service() as service:
        service.delete_employee(email)
    return "", 204
