"""
FastAPI dependencies handing out the collections built at startup.

`api.main` stores one `VisaCollection` and one `ApplicationCollection` on
`app.state` inside the lifespan; routes receive them through `Depends` so
tests can swap in other collections without touching module globals.
"""
from fastapi import Request

from dbase.collections.ApplicationCollection import ApplicationCollection
from dbase.collections.VisaCollection import VisaCollection


def get_visas_db(request: Request) -> VisaCollection:
    return request.app.state.visas_db


def get_applications_db(request: Request) -> ApplicationCollection:
    return request.app.state.applications_db
