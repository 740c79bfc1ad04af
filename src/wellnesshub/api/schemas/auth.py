"""Registration schemas."""

from datetime import datetime

from pydantic import Field

from ...domain.entities.account import Account
from ...domain.enums import Role
from .common import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8, max_length=128)
    role: Role = Role.USER


class AccountSummary(CamelModel):
    id: str
    name: str
    email: str
    role: Role
    created_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountSummary":
        return cls(
            id=account.account_id,
            name=account.name,
            email=account.email,
            role=account.role,
            created_at=account.created_at,
        )
