import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.core.config import settings
from api.dependencies.database import get_visas_db
from api.errors import ValidationError
from api.schemas.VisaSchema import VisaCreate, VisaUpdate
from dbase.collections.VisaCollection import VisaCollection
from dbase.identifiers import is_valid_id

logger = logging.getLogger(__name__)

visa_router = APIRouter(tags=["visas"])


def _require_visa_id(visa_id: str) -> str:
    if not is_valid_id(visa_id):
        raise ValidationError("Invalid visa id")
    return visa_id


@visa_router.get("/visa")
def list_visas(visa_type: Optional[str] = None, visas_db: VisaCollection = Depends(get_visas_db)):
    """List all visas, optionally filtered by visa type."""
    return visas_db.list(visa_type=visa_type)


@visa_router.get("/visa-limited")
def list_limited_visas(visas_db: VisaCollection = Depends(get_visas_db)):
    """Latest-offers strip on the home page."""
    return visas_db.list(limit=settings.visa_limited_count)


@visa_router.get("/my-visa")
def list_my_visas(userEmail: Optional[str] = None, visas_db: VisaCollection = Depends(get_visas_db)):
    """List visas added by one user."""
    if not userEmail:
        raise ValidationError("User email is required")
    return visas_db.list_by_user(userEmail)


@visa_router.get("/visa/{visa_id}")
def get_visa(visa_id: str, visas_db: VisaCollection = Depends(get_visas_db)):
    visa = visas_db.get(_require_visa_id(visa_id))
    if not visa:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Visa not found"})
    return visa


@visa_router.post("/visa")
def create_visa(visa: VisaCreate, visas_db: VisaCollection = Depends(get_visas_db)):
    return visas_db.create(visa.model_dump(exclude_unset=True))


@visa_router.put("/visa/{visa_id}")
def update_visa(visa_id: str, visa: VisaUpdate, visas_db: VisaCollection = Depends(get_visas_db)):
    """Replace only the fields sent in the body."""
    _require_visa_id(visa_id)
    updates = visa.model_dump(exclude_unset=True)
    if not updates:
        raise ValidationError("Nothing to update")
    return visas_db.update(visa_id, updates)


@visa_router.delete("/visa/{visa_id}")
def delete_visa(visa_id: str, visas_db: VisaCollection = Depends(get_visas_db)):
    result = visas_db.delete(_require_visa_id(visa_id))
    logger.info("Deleted visa %s (applications referencing it are kept)", visa_id)
    return result
