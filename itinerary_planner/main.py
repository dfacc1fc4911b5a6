# main.py

import datetime
import logging
import os
from typing import List

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from itinerary_planner.config import get_settings
from itinerary_planner.core.errors import ConfigurationError, InvalidRequestError
from itinerary_planner.core.models import Entry, ItineraryRequest
from itinerary_planner import planner

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Itinerary Planner")

INVALID_ENTRIES = "Invalid or missing entries."
MISSING_CONFIG = "Missing API configuration."
GENERIC_ERROR = "An error occurred while generating the itinerary."


# Request schema: one stop of the trip
class EntryIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(min_length=1)
    from_: datetime.date = Field(alias="from")
    to: datetime.date

    @field_validator("location")
    @classmethod
    def _strip_location(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("location must not be blank")
        return v

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _parse_date(cls, v):
        try:
            return planner.parse_date(v)
        except InvalidRequestError as exc:
            raise ValueError(str(exc))

    @model_validator(mode="after")
    def _check_order(self):
        if self.to < self.from_:
            raise ValueError("'to' must not be before 'from'")
        return self


class ItineraryBody(BaseModel):
    entries: List[EntryIn] = Field(min_length=1)

    def to_request(self) -> ItineraryRequest:
        return ItineraryRequest(
            entries=[Entry(location=e.location, start=e.from_, end=e.to) for e in self.entries]
        )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/itinerary")
async def generate_itinerary_endpoint(request: Request):
    try:
        settings = get_settings()
        settings.require_credentials()
    except ConfigurationError as e:
        logger.error("%s", e)
        return _error(500, MISSING_CONFIG)

    try:
        body = ItineraryBody.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        logger.info("Rejected itinerary request: %s", e)
        return _error(400, INVALID_ENTRIES)

    try:
        result = await run_in_threadpool(planner.plan_trip, body.to_request(), settings)
    except InvalidRequestError:
        return _error(400, INVALID_ENTRIES)
    except ConfigurationError as e:
        logger.error("%s", e)
        return _error(500, MISSING_CONFIG)
    except Exception:
        logger.exception("Error generating itinerary")
        return _error(500, GENERIC_ERROR)

    return JSONResponse(status_code=200, content=result.to_dict())


def serve() -> None:
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    serve()
