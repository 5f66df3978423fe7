from .auth_schemas import Token, UserLogin, UserRegister
from .schemas import (
    Company,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyFilter,
    CompanyJob,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
    DeletedResponse,
    Job,
    JobFilter,
    JobListResponse,
    JobNew,
    JobResponse,
    JobUpdate,
    User,
    UserListResponse,
    UserNew,
    UserResponse,
    UserUpdate,
    UserWithTokenResponse,
)

__all__ = [
    "Token",
    "UserLogin",
    "UserRegister",
    "Company",
    "CompanyDetail",
    "CompanyDetailResponse",
    "CompanyFilter",
    "CompanyJob",
    "CompanyListResponse",
    "CompanyNew",
    "CompanyResponse",
    "CompanyUpdate",
    "DeletedResponse",
    "Job",
    "JobFilter",
    "JobListResponse",
    "JobNew",
    "JobResponse",
    "JobUpdate",
    "User",
    "UserListResponse",
    "UserNew",
    "UserResponse",
    "UserUpdate",
    "UserWithTokenResponse",
]
