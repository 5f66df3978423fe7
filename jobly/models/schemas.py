"""Pydantic request/response models.

Request models forbid unknown fields, so anything that reaches a
repository only carries recognized keys.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

URL_PATTERN = r"^https?://\S+$"


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


def reject_null(value: Any, info: ValidationInfo) -> Any:
    """Updates may omit a field but not set a non-nullable column to null."""
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


# ==================== Companies ====================


class CompanyNew(StrictModel):
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    numEmployees: int | None = Field(default=None, ge=0)
    logoUrl: str | None = Field(default=None, pattern=URL_PATTERN)


class CompanyUpdate(StrictModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    numEmployees: int | None = Field(default=None, ge=0)
    logoUrl: str | None = Field(default=None, pattern=URL_PATTERN)

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return reject_null(value, info)


class CompanyFilter(StrictModel):
    name: str | None = Field(default=None, min_length=1)
    minEmployees: int | None = Field(default=None, ge=0)
    maxEmployees: int | None = Field(default=None, ge=0)


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None


class Company(BaseModel):
    handle: str
    name: str
    description: str
    numEmployees: int | None = None
    logoUrl: str | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJob] = []


# ==================== Jobs ====================


class JobNew(StrictModel):
    title: str = Field(..., min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(StrictModel):
    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return reject_null(value, info)


class JobFilter(StrictModel):
    title: str | None = Field(default=None, min_length=1)
    minSalary: int | None = Field(default=None, ge=0)
    hasEquity: Literal["true", "false"] | None = None


class Job(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None
    companyHandle: str


# ==================== Users ====================


class UserNew(StrictModel):
    """Admin-only user creation; may create admins."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    firstName: str = Field(..., min_length=1, max_length=30)
    lastName: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    isAdmin: bool = False


class UserUpdate(StrictModel):
    password: str | None = Field(default=None, min_length=5, max_length=20)
    firstName: str | None = Field(default=None, min_length=1, max_length=30)
    lastName: str | None = Field(default=None, min_length=1, max_length=30)
    email: EmailStr | None = None

    @field_validator("password", "firstName", "lastName", "email")
    @classmethod
    def not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return reject_null(value, info)


class User(BaseModel):
    username: str
    firstName: str
    lastName: str
    email: str
    isAdmin: bool


# ==================== Envelopes ====================


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[Company]


class JobResponse(BaseModel):
    job: Job


class JobListResponse(BaseModel):
    jobs: list[Job]


class UserResponse(BaseModel):
    user: User


class UserListResponse(BaseModel):
    users: list[User]


class UserWithTokenResponse(BaseModel):
    user: User
    token: str


class DeletedResponse(BaseModel):
    deleted: str | int
