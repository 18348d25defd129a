"""
Core landmass generation functionality.
"""

from .exceptions import ConfigurationError
from .noise_field import NoiseFieldSampler, OpenSimplexNoise, seed_offsets
from .regions import label_regions, region_sizes
from .separation import MIN_DISTANCE, enforce_minimum_distance
from .protrusions import PROTRUSION_PATTERNS, neighbor_flags, remove_protrusions, should_remove
from .land_generator import GenerationResult, LandmassConfig, LandmassGenerator, generate_landmass

__all__ = ['ConfigurationError', 'NoiseFieldSampler', 'OpenSimplexNoise', 'seed_offsets',
           'label_regions', 'region_sizes', 'MIN_DISTANCE', 'enforce_minimum_distance',
           'PROTRUSION_PATTERNS', 'neighbor_flags', 'remove_protrusions', 'should_remove',
           'GenerationResult', 'LandmassConfig', 'LandmassGenerator', 'generate_landmass']
