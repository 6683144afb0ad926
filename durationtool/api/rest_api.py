"""
REST API for the duration dashboard.
Exposes loading, range filtering and statistics to the presentation layer.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import API_VERSION
from ..exceptions import EmptyInputError, FetchError, NoValidRowsError
from ..logger import setup_logger
from ..models import DateRange
from ..services import DataService, MetricsService, get_data_service

logger = setup_logger(__name__)


# ============================================================================
# Models
# ============================================================================

class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    timestamp: datetime


class RangeModel(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None


class RowModel(BaseModel):
    date: str = Field(..., description="Canonical date (YYYY-MM-DD)", examples=["2022-01-04"])
    value: float


class StatisticsModel(BaseModel):
    """Summary statistics, as raw values and 4-decimal display strings."""
    max: float
    min: float
    avg: float
    display: dict[str, str]
    sample_count: int


class ReloadResponse(BaseModel):
    row_count: int
    skipped_count: int
    date_range: RangeModel
    source: str


class SeriesResponse(BaseModel):
    rows: List[RowModel]
    date_range: RangeModel
    statistics: StatisticsModel


# ============================================================================
# FastAPI App
# ============================================================================

api = FastAPI(
    title="Duration Data API",
    description="Range filtering and statistics over the duration time series",
    version=API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

api.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

metrics_service = MetricsService()


def _statistics_model(summary: dict) -> StatisticsModel:
    stats = summary['statistics']
    return StatisticsModel(
        max=stats['max'],
        min=stats['min'],
        avg=stats['avg'],
        display=summary['display'],
        sample_count=summary['sample_count'],
    )


def _require_series(service: DataService):
    series = service.get_series()
    if series is None:
        raise HTTPException(status_code=409, detail="No data loaded yet; call the reload endpoint first")
    return series


def _selected_range(service: DataService, start: Optional[str], end: Optional[str]) -> DateRange:
    if start is None and end is None:
        return service.date_range
    return DateRange(start, end)


# ============================================================================
# Endpoints
# ============================================================================

@api.get("/api/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if API is running."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now()
    )


@api.post(f"/api/{API_VERSION}/series/reload", response_model=ReloadResponse, tags=["Series"])
async def reload_series(service: DataService = Depends(get_data_service)):
    """
    Fetch and parse the data file again, replacing the loaded series.
    """
    if service.is_loading:
        raise HTTPException(status_code=409, detail="A load is already in progress")

    try:
        result = await service.load()
    except FetchError as e:
        raise HTTPException(status_code=502, detail=e.to_dict())
    except (EmptyInputError, NoValidRowsError) as e:
        raise HTTPException(
            status_code=422,
            detail={"message": e.message, "url": e.source or service.url, "status_code": None},
        )

    return ReloadResponse(
        row_count=len(result.series),
        skipped_count=result.skipped_count,
        date_range=RangeModel(**result.date_range.to_dict()),
        source=result.source,
    )


@api.get(f"/api/{API_VERSION}/series", response_model=SeriesResponse, tags=["Series"])
async def get_series(
    start: Optional[str] = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    end: Optional[str] = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
    service: DataService = Depends(get_data_service),
):
    """
    Get the rows within a date range together with their statistics.

    Without start/end the currently selected range is used.
    """
    _require_series(service)
    date_range = _selected_range(service, start, end)
    filtered = service.get_filtered_series(date_range)

    return SeriesResponse(
        rows=[RowModel(**row.to_dict()) for row in filtered],
        date_range=RangeModel(**date_range.to_dict()),
        statistics=_statistics_model(metrics_service.summarize(filtered)),
    )


@api.get(f"/api/{API_VERSION}/series/stats", response_model=StatisticsModel, tags=["Series"])
async def get_series_stats(
    start: Optional[str] = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    end: Optional[str] = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
    service: DataService = Depends(get_data_service),
):
    """Get statistics only for a date range."""
    series = _require_series(service)
    summary = metrics_service.summarize_range(series, _selected_range(service, start, end))
    return _statistics_model(summary)


# ============================================================================
# Mount to main app or run standalone
# ============================================================================

def get_api_app() -> FastAPI:
    """Get the FastAPI app for mounting."""
    return api


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(api, host="0.0.0.0", port=3000)
