"""Company API endpoints.

- Create, update and delete companies (admin only)
- List companies with optional filters, get one company with its jobs (anyone)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobly.api.deps import require_admin
from jobly.db.session import get_db
from jobly.models.schemas import (
    CompanyDetailResponse,
    CompanyFilter,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
    DeletedResponse,
)
from jobly.repositories.company import company_repository
from jobly.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_company(body: CompanyNew, db: Session = Depends(get_db)):
    """Create a company.

    Authorization required: admin
    """
    logger.info(f"POST /companies: handle={body.handle}")
    company = company_repository.create(db, body.model_dump())
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    filters: Annotated[CompanyFilter, Query()],
    db: Session = Depends(get_db),
):
    """List companies.

    Optional filters:
    - name: case-insensitive partial match
    - minEmployees / maxEmployees: inclusive bounds on employee count

    Authorization required: none
    """
    terms = filters.model_dump(exclude_none=True)
    logger.info(f"GET /companies: filters={terms}")
    return {"companies": company_repository.find_all(db, terms)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str, db: Session = Depends(get_db)):
    """Get a company and its jobs.

    Authorization required: none
    """
    logger.info(f"GET /companies/{handle}")
    return {"company": company_repository.get_with_jobs(db, handle)}


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin)])
async def update_company(handle: str, body: CompanyUpdate, db: Session = Depends(get_db)):
    """Partially update a company. The handle cannot change.

    Authorization required: admin
    """
    data = body.model_dump(exclude_unset=True)
    logger.info(f"PATCH /companies/{handle}: fields={list(data)}")
    return {"company": company_repository.update(db, handle, data)}


@router.delete("/{handle}", response_model=DeletedResponse, dependencies=[Depends(require_admin)])
async def delete_company(handle: str, db: Session = Depends(get_db)):
    """Delete a company and, by cascade, its jobs.

    Authorization required: admin
    """
    logger.info(f"DELETE /companies/{handle}")
    company_repository.remove(db, handle)
    return {"deleted": handle}
