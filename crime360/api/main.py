"""
Crime 360 HTTP API.
JSON endpoints the public safety dashboard and the police portal read from.
"""

from fastapi import FastAPI, HTTPException, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
from datetime import date
import logging
import math

from .schemas import (
    IncidentSearchRequest,
    FaceSearchRequest,
    FaceImageSearchRequest,
    SearchResponseModel,
    FaceSearchResponseModel,
    FrequencyResponse,
    AnalyticsSnapshotResponse,
    HeatmapResponse,
    HealthResponse,
    bounds_from_params,
)
from ..core.config import VERSION, FACE_FEATURE_DIMENSION, debug_enabled, get_cors_origins, validate_config
from ..core.engine import Crime360Engine, OperationFailedError, create_engine
from ..core.fields import IncidentField
from ..core.query import DateRange
from ..vector.features import DeterministicHashFaceEncoder

_engine: Optional[Crime360Engine] = None


def get_engine() -> Crime360Engine:
    """Engine dependency; the store is loaded once on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_feature_extractor() -> DeterministicHashFaceEncoder:
    return DeterministicHashFaceEncoder(dimension=FACE_FEATURE_DIMENSION)


# Initialize the FastAPI application
app = FastAPI(
    title="Crime 360 API",
    version=VERSION,
    description="Crime records search, face matching and analytics for the Crime 360 dashboards",
    docs_url="/docs" if debug_enabled() else None,
    redoc_url="/redoc" if debug_enabled() else None
)

# Add CORS middleware to allow dashboard connections
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health", response_model=HealthResponse)
def health_check_endpoint(engine: Crime360Engine = Depends(get_engine)):
    """Check system health."""
    issues = validate_config()
    return HealthResponse(
        status="healthy" if not issues else "degraded",
        version=VERSION,
        datasets=list(engine.store.datasets),
        incident_count=len(engine.store.incidents),
        person_count=len(engine.store.persons),
        config_issues=issues
    )

@app.post("/incidents/search", response_model=SearchResponseModel)
def search_incidents_endpoint(request: IncidentSearchRequest, engine: Crime360Engine = Depends(get_engine)):
    """Full-text and filtered FIR search."""
    response = engine.search(request.to_query())
    return SearchResponseModel.from_engine(response)

@app.get("/incidents/{qualified_id}")
def get_incident_endpoint(qualified_id: str, engine: Crime360Engine = Depends(get_engine)):
    """Get a single incident by its dataset-qualified id (e.g. bangalore:4)."""
    record = engine.get_incident(qualified_id)
    if not record:
        raise HTTPException(status_code=404, detail="Incident not found")
    return record.to_dict()

@app.get("/persons/{qualified_id}")
def get_person_endpoint(qualified_id: str, engine: Crime360Engine = Depends(get_engine)):
    """Get a single person of interest by dataset-qualified id."""
    record = engine.get_person(qualified_id)
    if not record:
        raise HTTPException(status_code=404, detail="Person not found")
    return record.to_dict()

@app.post("/faces/search", response_model=FaceSearchResponseModel)
def search_faces_endpoint(request: FaceSearchRequest, engine: Crime360Engine = Depends(get_engine)):
    """Rank persons of interest by similarity to a feature vector."""
    response = engine.search_by_similarity(request.features, request.threshold, request.top_k)
    return FaceSearchResponseModel(query_dimension=len(request.features), **response.to_dict())

@app.post("/faces/search-image", response_model=FaceSearchResponseModel)
def search_faces_by_image_endpoint(request: FaceImageSearchRequest,
                                   engine: Crime360Engine = Depends(get_engine),
                                   extractor: DeterministicHashFaceEncoder = Depends(get_feature_extractor)):
    """Extract features from an uploaded image, then run a face search."""
    try:
        features = extractor.extract_base64(request.image_base64)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    response = engine.search_by_similarity(features, request.threshold, request.top_k)
    return FaceSearchResponseModel(query_dimension=len(features), **response.to_dict())

@app.get("/analytics/aggregate/{field}", response_model=FrequencyResponse)
def aggregate_endpoint(field: IncidentField, engine: Crime360Engine = Depends(get_engine)):
    """Document counts per distinct value of an incident field."""
    return FrequencyResponse.from_table(engine.aggregate_by(field))

@app.get("/analytics/snapshot", response_model=AnalyticsSnapshotResponse)
def analytics_snapshot_endpoint(date_from: Optional[date] = None, date_to: Optional[date] = None,
                                engine: Crime360Engine = Depends(get_engine)):
    """Composite dashboard analytics over an optional filing-date range."""
    if date_from and date_to and date_from > date_to:
        raise HTTPException(status_code=400, detail="date_from must not be after date_to")

    date_range = DateRange(start=date_from, end=date_to) if (date_from or date_to) else None
    return AnalyticsSnapshotResponse.from_snapshot(engine.aggregate_snapshot(date_range))

@app.get("/analytics/heatmap", response_model=HeatmapResponse)
def heatmap_endpoint(top_left_lat: Optional[float] = Query(default=None, ge=-90, le=90),
                     top_left_lon: Optional[float] = Query(default=None, ge=-180, le=180),
                     bottom_right_lat: Optional[float] = Query(default=None, ge=-90, le=90),
                     bottom_right_lon: Optional[float] = Query(default=None, ge=-180, le=180),
                     engine: Crime360Engine = Depends(get_engine)):
    """Weighted incident points for the crime heatmap."""
    try:
        bounds = bounds_from_params(top_left_lat, top_left_lon, bottom_right_lat, bottom_right_lon)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HeatmapResponse.from_heatmap(engine.heatmap(bounds))


def _json_safe(value):
    """Replace NaN and infinities, which strict JSON cannot carry, with their string form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Report request validation errors, including ones raised by non-finite numbers."""
    return JSONResponse(status_code=422, content={"detail": _json_safe(jsonable_encoder(exc.errors()))})


@app.exception_handler(OperationFailedError)
async def operation_failed_handler(request, exc):
    """Surface engine failures as the generic operation-failed signal."""
    logging.error(f"Operation failed: {exc}")
    content = {"detail": "Operation failed"}
    if debug_enabled():
        content["debug"] = str(exc.__cause__ or exc)
    return JSONResponse(status_code=500, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle all unhandled exceptions."""
    logging.error(f"Unhandled exception: {exc}")
    content = {"detail": "Operation failed"}
    if debug_enabled():
        content["debug"] = str(exc)
    status_code = 500
    return JSONResponse(
        status_code=status_code,
        content=content,
    )


if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "crime360.api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
