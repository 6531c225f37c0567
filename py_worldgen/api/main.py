"""FastAPI main application."""

from typing import Dict, List, Literal, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.exceptions import WorldGenerationError
from ..core.models import (
    GeneratedWorld,
    GenerationLevel,
    Geography,
    Organization,
    PrimordialBeing,
    WorldGenerationConfig,
)
from ..core.world_generator import WorldGenerator
from ..utils.logging import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="World Generator API",
    description="Deterministic seeded generator for hierarchical fantasy worlds",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

generator = WorldGenerator()


# Request/Response models
class WorldGenerationRequest(BaseModel):
    """Request to generate a new world."""

    seed: Optional[str] = Field(None, description="Seed for reproducible generation")
    include_levels: Optional[List[GenerationLevel]] = Field(
        None, description="Levels to generate; defaults depend on depth"
    )
    depth: Literal["full", "partial", "minimal"] = Field("full", description="Default level set")
    custom_primordials: Optional[List[str]] = Field(None, description="Primordial types to use")
    custom_races: Optional[List[str]] = Field(None, description="Mortal race types to use")
    organization_density: Optional[Literal["sparse", "normal", "dense"]] = Field(
        None, description="Organization density"
    )

    def to_config(self) -> WorldGenerationConfig:
        return WorldGenerationConfig(
            seed=self.seed or settings.default_seed,
            include_levels=self.include_levels,
            depth=self.depth,
            custom_primordials=self.custom_primordials,
            custom_races=self.custom_races,
            organization_density=self.organization_density
            or settings.default_organization_density,
        )


class WorldSummary(BaseModel):
    """Entity counts of a generated world."""

    seed: str
    counts: Dict[str, int]


@app.exception_handler(WorldGenerationError)
async def world_generation_error_handler(request: Request, exc: WorldGenerationError):
    logger.warning("Rejected generation request", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Event handlers
@app.on_event("startup")
async def startup_event():
    logger.info("Starting World Generator API", version=__version__)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down World Generator API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "World Generator API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/worlds/generate", response_model=GeneratedWorld)
async def generate_world(request: WorldGenerationRequest):
    """Generate a world. Identical requests produce identical worlds."""
    config = request.to_config()
    logger.info("Generation requested", seed=config.seed, depth=config.depth)
    return await generator.generate_world(config)


@app.get("/worlds/{seed}/summary", response_model=WorldSummary)
async def get_world_summary(seed: str):
    """Entity counts of the full world for seed."""
    world = await generator.generate_world(WorldGenerationConfig(seed=seed))
    return WorldSummary(seed=seed, counts=world.summary())


@app.get("/worlds/{seed}/primordials", response_model=List[PrimordialBeing])
async def get_primordials(seed: str):
    return await generator.get_primordial_beings(seed)


@app.get("/worlds/{seed}/geography", response_model=List[Geography])
async def get_geography(seed: str, geography_type: Optional[str] = None):
    """Geography features, optionally filtered by kind (e.g. forest)."""
    return await generator.get_geography(seed, geography_type)


@app.get("/worlds/{seed}/organizations", response_model=List[Organization])
async def get_organizations(seed: str, magnitude: Optional[str] = None):
    """Organizations, optionally filtered by magnitude (e.g. kingdom)."""
    return await generator.get_organizations(seed, magnitude)


def main():
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
