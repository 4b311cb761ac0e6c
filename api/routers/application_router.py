import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.core.config import settings
from api.dependencies.database import get_applications_db, get_visas_db
from api.errors import ValidationError
from api.schemas.ApplicationSchema import ApplicationCreate
from api.services.enrichment import enrich_applications
from dbase.collections.ApplicationCollection import ApplicationCollection
from dbase.collections.VisaCollection import VisaCollection
from dbase.identifiers import is_valid_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


@router.post("/visa-application")
def create_application(
    application: ApplicationCreate,
    applications_db: ApplicationCollection = Depends(get_applications_db),
):
    """Save a user's visa application."""
    data = application.model_dump()
    logger.info("Received visa application for visa %s from %s", data.get("visaId"), data.get("userEmail"))

    if not data.get("visaId") or not is_valid_id(data["visaId"]):
        raise ValidationError("Invalid or missing visaId")

    if not data.get("userEmail") or not isinstance(data["userEmail"], str):
        raise ValidationError("User email is required")

    return applications_db.create(data)


@router.get("/my-visa-application")
def list_my_applications(
    userEmail: Optional[str] = None,
    applications_db: ApplicationCollection = Depends(get_applications_db),
    visas_db: VisaCollection = Depends(get_visas_db),
):
    """List a user's applications, each joined with the visa it was filed for."""
    if not userEmail:
        raise ValidationError("User email is required")

    applications = applications_db.list_by_user(userEmail)
    logger.debug("Enriching %d applications for %s", len(applications), userEmail)
    return enrich_applications(applications, visas_db.get, max_workers=settings.enrichment_workers)


@router.delete("/visa-application/{application_id}")
def delete_application(
    application_id: str,
    applications_db: ApplicationCollection = Depends(get_applications_db),
):
    """Withdraw an application."""
    if not is_valid_id(application_id):
        raise ValidationError("Invalid application id")
    return applications_db.delete(application_id)
