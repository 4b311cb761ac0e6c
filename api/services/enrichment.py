"""
Join a user's applications with the visas they reference.

Each application carries `visaId`, a plain string that the store never checks
against the visas collection. Listing resolves it at read time and copies a
snapshot of the visa's display fields onto the application. A missing,
malformed or dangling reference only means that application goes out without
visa fields; it never fails the rest of the batch.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from dbase.identifiers import is_valid_id

logger = logging.getLogger(__name__)

ENRICHMENT_FIELDS = (
    "country_name",
    "country_image",
    "visa_type",
    "processing_time",
    "fee",
    "validity",
    "application_method",
)

VisaLookup = Callable[[str], Optional[dict]]


def enrich_application(application: dict, visa_lookup: VisaLookup) -> dict:
    enriched = dict(application)
    visa_id = application.get("visaId")
    if not is_valid_id(visa_id):
        return enriched

    visa = visa_lookup(visa_id)
    if visa is None:
        logger.debug("Application %s references missing visa %s", application.get("id"), visa_id)
        return enriched

    for field in ENRICHMENT_FIELDS:
        if field in visa:
            enriched[field] = visa[field]
    return enriched


def enrich_applications(
    applications: Iterable[dict],
    visa_lookup: VisaLookup,
    max_workers: Optional[int] = None,
) -> List[dict]:
    """
    Enrich every application, keeping the order they were fetched in.

    With `max_workers` above 1 the visa lookups run on a thread pool;
    `Executor.map` hands results back in input order regardless of which
    lookup finishes first.
    """
    applications = list(applications)
    if not max_workers or max_workers <= 1 or len(applications) <= 1:
        return [enrich_application(application, visa_lookup) for application in applications]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(applications))) as executor:
        return list(executor.map(lambda application: enrich_application(application, visa_lookup), applications))
