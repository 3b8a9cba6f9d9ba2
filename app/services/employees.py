"""HR service for crew and ground staff records."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.domain.errors import ValidationError
from app.domain.services import EmployeeDomainService
from app.models import Employee
from app.repositories import EmployeeRepository
from app.services.base import LifecycleService


class EmployeeService(LifecycleService[Employee]):
    repository_class = EmployeeRepository
    unique_fields = ("employee_number", "email")

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        if isinstance(fields.get("employee_number"), str):
            fields["employee_number"] = EmployeeDomainService.normalise_employee_number(
                fields["employee_number"]
            )
        if isinstance(fields.get("email"), str):
            fields["email"] = fields["email"].strip().lower()
        for name in ("first_name", "last_name"):
            if isinstance(fields.get(name), str):
                fields[name] = fields[name].strip()
        return fields

    def validate(self, entity: Employee) -> None:
        if not entity.employee_number:
            raise ValidationError("Employee number is required")
        if not entity.first_name or not entity.last_name:
            raise ValidationError("First and last name are required")
        if not EmployeeDomainService.is_valid_email(entity.email):
            raise ValidationError("Email address is not valid")
        if entity.position is None:
            raise ValidationError("Position is required")
        if entity.hire_date is None:
            raise ValidationError("Hire date is required")
        if entity.hire_date > date.today():
            raise ValidationError("Hire date cannot be in the future")


__all__ = ["EmployeeService"]
