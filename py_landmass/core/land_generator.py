"""
Landmass generation pipeline.

Runs the stages in order on one land map:

1. Noise sampling and thresholding
2. Minimum distance enforcement between separate regions
3. Protrusion removal
4. Painting onto the render target
5. A second protrusion removal pass, then a render refresh
6. Diagnostics dump of the final map

The second protrusion pass runs on a map already at its fixed point, so
it normally removes nothing; it is kept so the painted map and the
returned map go through the same sequence of passes.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Hashable, Optional

import numpy as np
import structlog

from .exceptions import ConfigurationError
from .noise_field import NoiseFieldSampler, NoiseSource
from .protrusions import remove_protrusions
from .regions import label_regions
from .separation import MIN_DISTANCE, enforce_minimum_distance
from ..render.diagnostics import Diagnostics
from ..render.tile_grid import LAND_TILE, RenderTarget, paint_land_map
from ..utils.random import RANDOM_SEED, SeedProvider

logger = structlog.get_logger()


@dataclass
class LandmassConfig:
    """Configuration for landmass generation."""

    width: int = 50
    height: int = 50
    noise_scale: float = 0.1
    threshold: float = 0.5
    seed: int = RANDOM_SEED
    min_distance: int = MIN_DISTANCE
    land_tile: Hashable = LAND_TILE

    def __post_init__(self):
        for name in ("width", "height", "seed", "min_distance"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        for name in ("noise_scale", "threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")

        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"width and height must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.noise_scale <= 1.0:
            raise ConfigurationError(f"noise_scale must be within [0, 1], got {self.noise_scale}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigurationError(f"threshold must be within [0, 1], got {self.threshold}")
        if self.min_distance < 0:
            raise ConfigurationError(f"min_distance must be >= 0, got {self.min_distance}")

    @classmethod
    def from_settings(cls, settings, **overrides) -> "LandmassConfig":
        """Build a config from application settings, with keyword overrides."""
        values = {
            "width": settings.default_map_width,
            "height": settings.default_map_height,
            "noise_scale": settings.noise_scale,
            "threshold": settings.threshold,
            "seed": settings.seed,
            "land_tile": settings.land_tile,
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class StageStats:
    """Land cell counts recorded after each pipeline stage."""

    sampled_land: int = 0
    region_count: int = 0
    separated_land: int = 0
    first_pass_removed: int = 0
    second_pass_removed: int = 0
    final_land: int = 0


@dataclass
class GenerationResult:
    """Output of a generation run."""

    land: np.ndarray
    seed: int
    config: LandmassConfig
    stats: StageStats = field(default_factory=StageStats)

    @property
    def is_degenerate(self) -> bool:
        """True when the map contains no land at all."""
        return not self.land.any()

    @property
    def land_cells(self) -> int:
        return int(self.land.sum())


class LandmassGenerator:
    """Generates a land map and hands it to the output collaborators."""

    def __init__(
        self,
        config: LandmassConfig,
        noise: Optional[NoiseSource] = None,
        render_target: Optional[RenderTarget] = None,
        diagnostics: Optional[Diagnostics] = None,
        seed_provider: Optional[SeedProvider] = None,
    ):
        """
        Args:
            config: Generation parameters
            noise: Noise source, OpenSimplex seeded with the map seed by default
            render_target: Optional tile surface to paint the map onto
            diagnostics: Optional sink for the seed and the final map
            seed_provider: Resolves the RANDOM_SEED sentinel
        """
        self.config = config
        self.noise = noise
        self.render_target = render_target
        self.diagnostics = diagnostics
        self.seed_provider = seed_provider or SeedProvider()

    def generate(self) -> GenerationResult:
        config = self.config
        seed = self.seed_provider.resolve(config.seed)
        stats = StageStats()

        log = logger.bind(seed=seed, width=config.width, height=config.height)
        log.info("Starting landmass generation")
        if self.diagnostics is not None:
            self.diagnostics.report_seed(seed)

        sampler = NoiseFieldSampler(config.noise_scale, config.threshold, seed, noise=self.noise)
        land = sampler.sample_land_map(config.width, config.height)
        stats.sampled_land = int(land.sum())

        region_ids, stats.region_count = label_regions(land)
        land = enforce_minimum_distance(land, config.min_distance, region_ids=region_ids)
        stats.separated_land = int(land.sum())
        log.info(
            "Separated regions",
            regions=stats.region_count,
            sampled_land=stats.sampled_land,
            separated_land=stats.separated_land,
        )

        stats.first_pass_removed = remove_protrusions(land)

        if self.render_target is not None:
            paint_land_map(self.render_target, land, config.land_tile)

        stats.second_pass_removed = remove_protrusions(land)
        if stats.second_pass_removed:
            log.warning("Second protrusion pass changed the map", removed=stats.second_pass_removed)

        if self.render_target is not None:
            self.render_target.refresh()

        stats.final_land = int(land.sum())
        result = GenerationResult(land=land, seed=seed, config=config, stats=stats)

        if result.is_degenerate:
            log.warning("Generated map has no land")

        if self.diagnostics is not None:
            self.diagnostics.dump_map(land)

        log.info("Landmass generation completed", land_cells=stats.final_land)
        return result


def generate_landmass(
    width: int = 50,
    height: int = 50,
    noise_scale: float = 0.1,
    threshold: float = 0.5,
    seed: int = RANDOM_SEED,
    **kwargs,
) -> GenerationResult:
    """Generate a land map without render target or diagnostics."""
    config = LandmassConfig(
        width=width, height=height, noise_scale=noise_scale, threshold=threshold, seed=seed
    )
    return LandmassGenerator(config, **kwargs).generate()
