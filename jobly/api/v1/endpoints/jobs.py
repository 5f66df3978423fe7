"""Job API endpoints.

- Create, update and delete jobs (admin only)
- List jobs with optional filters, get one job (anyone)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobly.api.deps import require_admin
from jobly.db.session import get_db
from jobly.models.schemas import (
    DeletedResponse,
    JobFilter,
    JobListResponse,
    JobNew,
    JobResponse,
    JobUpdate,
)
from jobly.repositories.job import job_repository
from jobly.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_job(body: JobNew, db: Session = Depends(get_db)):
    """Create a job for an existing company.

    Authorization required: admin
    """
    logger.info(f"POST /jobs: title={body.title}, company={body.companyHandle}")
    return {"job": job_repository.create(db, body.model_dump())}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    filters: Annotated[JobFilter, Query()],
    db: Session = Depends(get_db),
):
    """List jobs.

    Optional filters:
    - title: case-insensitive partial match
    - minSalary: salary at least this much
    - hasEquity: "true" for jobs with non-zero equity; "false" does not filter

    Authorization required: none
    """
    terms = filters.model_dump(exclude_none=True)
    logger.info(f"GET /jobs: filters={terms}")
    return {"jobs": job_repository.find_all(db, terms)}


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get a job.

    Authorization required: none
    """
    logger.info(f"GET /jobs/{job_id}")
    return {"job": job_repository.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_admin)])
async def update_job(job_id: int, body: JobUpdate, db: Session = Depends(get_db)):
    """Partially update a job. Neither id nor companyHandle can change.

    Authorization required: admin
    """
    data = body.model_dump(exclude_unset=True)
    logger.info(f"PATCH /jobs/{job_id}: fields={list(data)}")
    return {"job": job_repository.update(db, job_id, data)}


@router.delete("/{job_id}", response_model=DeletedResponse, dependencies=[Depends(require_admin)])
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    """Delete a job.

    Authorization required: admin
    """
    logger.info(f"DELETE /jobs/{job_id}")
    job_repository.remove(db, job_id)
    return {"deleted": job_id}
