"""
End-to-end tests for the landmass generation pipeline.
"""

import pytest
import numpy as np

from py_landmass.config import Settings
from py_landmass.core.exceptions import ConfigurationError
from py_landmass.core.land_generator import LandmassConfig, LandmassGenerator, generate_landmass
from py_landmass.core.protrusions import remove_protrusions
from py_landmass.render.diagnostics import MemoryDiagnostics, format_land_map
from py_landmass.render.tile_grid import TileGrid
from py_landmass.utils.random import SEED_RANGE, SeedProvider

DEFAULT_SEED = 123456


class ConstantNoise:
    """Noise source returning the same value everywhere."""

    def __init__(self, value):
        self.value = value

    def sample(self, x, y):
        return self.value


class RecordingTarget:
    """Render target remembering every call in order."""

    def __init__(self):
        self.calls = []

    def clear_all(self):
        self.calls.append(("clear_all",))

    def set_tile(self, x, y, tile):
        self.calls.append(("set_tile", x, y, tile))

    def refresh(self):
        self.calls.append(("refresh",))


class TestLandmassConfig:
    """Test configuration validation."""

    def test_defaults(self):
        config = LandmassConfig()

        assert (config.width, config.height) == (50, 50)
        assert config.noise_scale == 0.1
        assert config.threshold == 0.5
        assert config.seed == 0
        assert config.min_distance == 4

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -3},
            {"noise_scale": 1.2},
            {"noise_scale": -0.5},
            {"threshold": 2.0},
            {"threshold": -0.1},
            {"min_distance": -1},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ConfigurationError):
            LandmassConfig(**overrides)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 2.5},
            {"height": 3.0},
            {"width": "50"},
            {"width": True},
            {"seed": 1.5},
            {"min_distance": "4"},
            {"noise_scale": "0.1"},
            {"threshold": None},
        ],
    )
    def test_wrong_types_rejected(self, overrides):
        """Non-integer sizes and non-numeric parameters raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            LandmassConfig(**overrides)

    def test_numpy_integers_accepted(self):
        config = LandmassConfig(width=np.int64(20), height=np.int32(10))

        assert (config.width, config.height) == (20, 10)

    def test_fractional_width_does_not_reach_generation(self):
        with pytest.raises(ConfigurationError):
            generate_landmass(width=2.5, height=3, seed=7)

    def test_from_settings(self):
        settings = Settings(default_map_width=30, default_map_height=20, threshold=0.4)

        config = LandmassConfig.from_settings(settings, seed=7)

        assert (config.width, config.height) == (30, 20)
        assert config.threshold == 0.4
        assert config.seed == 7
        assert config.land_tile == settings.land_tile


class TestLandmassGenerator:
    """Test the full pipeline."""

    @pytest.fixture
    def config(self):
        return LandmassConfig(width=40, height=30, seed=DEFAULT_SEED)

    def test_deterministic(self, config):
        """Same configuration and seed give bit-identical maps."""
        first = LandmassGenerator(config).generate()
        second = LandmassGenerator(LandmassConfig(width=40, height=30, seed=DEFAULT_SEED)).generate()

        assert first.seed == second.seed == DEFAULT_SEED
        assert np.array_equal(first.land, second.land)

    def test_result_shape(self, config):
        result = LandmassGenerator(config).generate()

        assert result.land.shape == (30, 40)
        assert result.land.dtype == np.bool_
        assert result.config is config

    def test_final_map_is_fixed_point(self, config):
        result = LandmassGenerator(config).generate()

        assert result.stats.second_pass_removed == 0
        assert remove_protrusions(result.land.copy()) == 0

    def test_stage_statistics(self, config):
        stats = LandmassGenerator(config).generate().stats

        assert stats.sampled_land >= stats.separated_land
        assert stats.separated_land - stats.first_pass_removed == stats.final_land
        assert stats.final_land >= 0

    def test_random_seed_drawn_from_range(self):
        provider = SeedProvider(np.random.default_rng(2024))
        config = LandmassConfig(width=20, height=20, seed=0)

        result = LandmassGenerator(config, seed_provider=provider).generate()

        assert SEED_RANGE[0] <= result.seed < SEED_RANGE[1]

    def test_render_target_receives_map(self, config):
        target = TileGrid()

        result = LandmassGenerator(config, render_target=target).generate()

        assert target.clear_count == 1
        assert target.refresh_count == 1
        assert np.array_equal(target.to_land_map(config.width, config.height), result.land)
        assert set(target.tiles.values()) <= {None, config.land_tile}

    def test_render_call_order(self, config):
        """Clear comes first, then padding and cells, then a single refresh last."""
        target = RecordingTarget()

        result = LandmassGenerator(config, render_target=target).generate()

        names = [call[0] for call in target.calls]
        assert names[0] == "clear_all"
        assert names[-1] == "refresh"
        assert names.count("clear_all") == 1
        assert names.count("refresh") == 1
        assert set(names[1:-1]) == {"set_tile"}

        padding_calls = 2 * (config.width + 2) + 2 * (config.height + 2)
        padding = target.calls[1:1 + padding_calls]
        cells = target.calls[1 + padding_calls:-1]
        assert all(tile is None for _, x, y, tile in padding)
        assert all(x in (-1, config.width) or y in (-1, config.height) for _, x, y, _ in padding)
        assert len(cells) == config.width * config.height
        for _, x, y, tile in cells:
            assert 0 <= x < config.width and 0 <= y < config.height
            assert (tile == config.land_tile) == bool(result.land[y, x])

    def test_render_target_padding(self, config):
        target = TileGrid()

        LandmassGenerator(config, render_target=target).generate()

        assert len(target.tiles) == (config.width + 2) * (config.height + 2)
        for x, y in [(-1, -1), (config.width, config.height), (-1, config.height), (config.width, -1)]:
            assert (x, y) in target.tiles
            assert target.tiles[(x, y)] is None

    def test_diagnostics_receive_seed_and_map(self, config):
        diagnostics = MemoryDiagnostics()

        result = LandmassGenerator(config, diagnostics=diagnostics).generate()

        assert diagnostics.seeds == [str(DEFAULT_SEED)]
        assert diagnostics.dumps == [format_land_map(result.land)]

    def test_degenerate_map_returned(self):
        """A threshold nothing can exceed yields an empty map, not an error."""
        result = LandmassGenerator(LandmassConfig(width=20, height=20, threshold=1.0, seed=5)).generate()

        assert result.is_degenerate
        assert result.land_cells == 0

    def test_grid_smaller_than_distance(self):
        result = LandmassGenerator(LandmassConfig(width=3, height=3, seed=9)).generate()

        assert result.land.shape == (3, 3)

    def test_full_land_is_kept(self):
        """A map that is land everywhere survives every stage."""
        config = LandmassConfig(width=12, height=8, seed=1)

        result = LandmassGenerator(config, noise=ConstantNoise(0.9)).generate()

        assert result.land.all()
        assert result.stats.region_count == 1

    def test_generate_landmass_helper(self):
        result = generate_landmass(width=25, height=25, seed=DEFAULT_SEED)

        expected = LandmassGenerator(LandmassConfig(width=25, height=25, seed=DEFAULT_SEED)).generate()
        assert np.array_equal(result.land, expected.land)
