"""FastAPI main application."""

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
import structlog

from .. import __version__
from ..config import settings
from ..core.exceptions import ConfigurationError
from ..core.land_generator import LandmassConfig, LandmassGenerator
from ..logging_config import configure_logging
from ..render.diagnostics import format_land_map

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Landmass Generator API",
    description="Procedural landmass maps from thresholded noise",
    version=__version__,
)


# Request/Response models
class LandmassRequest(BaseModel):
    """Request to generate a land map."""

    width: int = Field(settings.default_map_width, description="Map width in cells")
    height: int = Field(settings.default_map_height, description="Map height in cells")
    noise_scale: float = Field(settings.noise_scale, description="Noise sampling scale in [0, 1]")
    threshold: float = Field(settings.threshold, description="Land threshold in [0, 1]")
    seed: int = Field(settings.seed, description="Map seed, 0 for a random seed")


class StageStatistics(BaseModel):
    """Land cell counts per pipeline stage."""

    sampled_land: int
    region_count: int
    separated_land: int
    first_pass_removed: int
    second_pass_removed: int
    final_land: int


class LandmassResponse(BaseModel):
    """Generated land map."""

    seed: int
    width: int
    height: int
    land_cells: int
    region_count: int
    degenerate: bool
    rows: List[str]
    stats: StageStatistics


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Landmass Generator API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/maps/generate", response_model=LandmassResponse)
def generate_map(request: LandmassRequest):
    """Generate a land map and return it as text rows, top row first."""
    logger.info("Map generation requested", request=request.model_dump())

    try:
        if request.width > settings.max_map_width or request.height > settings.max_map_height:
            raise ConfigurationError(
                f"map size {request.width}x{request.height} exceeds the "
                f"{settings.max_map_width}x{settings.max_map_height} limit"
            )
        config = LandmassConfig.from_settings(settings, **request.model_dump())
    except ConfigurationError as e:
        logger.error("Invalid generation request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    result = LandmassGenerator(config).generate()
    stats = result.stats

    return LandmassResponse(
        seed=result.seed,
        width=config.width,
        height=config.height,
        land_cells=result.land_cells,
        region_count=stats.region_count,
        degenerate=result.is_degenerate,
        rows=format_land_map(result.land).splitlines(),
        stats=StageStatistics(**vars(stats)),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
