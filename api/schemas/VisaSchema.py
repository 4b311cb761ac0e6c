from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

Fee = Union[int, float, str]


class VisaCreate(BaseModel):
    """Payload used to create a visa offering. Unknown keys are stored as sent."""

    model_config = ConfigDict(extra="allow")

    country_name: Optional[str] = None
    country_image: Optional[str] = None
    visa_type: Optional[str] = None
    processing_time: Optional[str] = None
    fee: Optional[Fee] = None
    validity: Optional[str] = None
    application_method: Optional[str] = None
    description: Optional[str] = None
    age_restriction: Optional[Union[int, str]] = None
    required_documents: List[str] = []
    userEmail: Optional[str] = None


class VisaUpdate(BaseModel):
    """Partial update; only the keys present in the request are written."""

    model_config = ConfigDict(extra="allow")

    country_name: Optional[str] = None
    country_image: Optional[str] = None
    visa_type: Optional[str] = None
    processing_time: Optional[str] = None
    fee: Optional[Fee] = None
    validity: Optional[str] = None
    application_method: Optional[str] = None
    description: Optional[str] = None
    age_restriction: Optional[Union[int, str]] = None
    required_documents: Optional[List[str]] = None
