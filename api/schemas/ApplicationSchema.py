from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ApplicationCreate(BaseModel):
    """
    Visa application form. `visaId` and `userEmail` are checked by the router
    so a bad value is answered with the short error message clients expect;
    every other form field is stored as sent.
    """

    model_config = ConfigDict(extra="allow")

    visaId: Optional[Any] = None
    userEmail: Optional[Any] = None
