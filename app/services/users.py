"""Administrative user accounts."""

from __future__ import annotations

from typing import Any, Optional

from app.domain import lifecycle
from app.domain.errors import ValidationError
from app.domain.services import EmployeeDomainService
from app.models import User
from app.repositories import UserRepository
from app.services.base import LifecycleService
from app.utils import hash_password, verify_password

MIN_PASSWORD_LENGTH = 8


class UserService(LifecycleService[User]):
    repository_class = UserRepository
    unique_fields = ("email",)

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        if isinstance(fields.get("email"), str):
            fields["email"] = fields["email"].strip().lower()
        password = fields.pop("password", None)
        if password is not None:
            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
                )
            fields["password_hash"] = hash_password(password)
        return fields

    def validate(self, entity: User) -> None:
        if not EmployeeDomainService.is_valid_email(entity.email):
            raise ValidationError("Email address is not valid")
        if not entity.first_name or not entity.last_name:
            raise ValidationError("First and last name are required")
        if not entity.password_hash:
            raise ValidationError("Password is required")

    async def register(
        self,
        email: str,
        first_name: str,
        last_name: str,
        password: str,
        actor: Optional[str] = None,
    ) -> User:
        """Create an account; self-registration audits the new user as its own actor."""

        email = email.strip().lower()
        return await self.create(
            actor or email,
            email=email,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            password=password,
        )

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        user = await self.repository.find_one_by(email=email.strip().lower())
        if user is None or lifecycle.is_deleted(user):
            return None
        if not lifecycle.is_active(user):
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user


__all__ = ["UserService"]
