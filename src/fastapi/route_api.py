from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

# Load environment variables from .env file
load_dotenv()

from src.flight_paths.application import FindRoute
from src.flight_paths.config import RouterConfig
from src.flight_paths.exceptions import ValidationError
from src.flight_paths.schemas.search import SearchMethod

router = FindRoute(config=RouterConfig.from_env())

app = FastAPI(title="Flight Paths API")


# --- Pydantic Schemas (The JSON Contract) ---
# Read straight from the result dataclasses, including @property fields.


class RouteSegmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    origin: str
    destination: str
    weight: int


class SearchPathSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    segments: List[RouteSegmentSchema]
    total_weight: int  # Captures @property
    route_cities: List[str]  # Captures @property
    num_segments: int  # Captures @property


class RouteRequest(BaseModel):
    origin: str
    destination: str
    method: Optional[SearchMethod] = None


# --- API Endpoints ---


@app.post("/route", response_model=SearchPathSchema)
def find_route(request: RouteRequest):
    try:
        path = router.search(
            origin=request.origin,
            destination=request.destination,
            method=request.method,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if path is None:
        raise HTTPException(
            status_code=404,
            detail=f"No route from {request.origin} to {request.destination}",
        )

    return SearchPathSchema.model_validate(path)


@app.get("/locations", response_model=List[str])
def list_locations():
    return sorted(router.get_locations())
