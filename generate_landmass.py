#!/usr/bin/env python3
"""
Generate a landmass map from the command line.

Prints the seed and the final map as text (top row first). With --png the
map is also saved as an image.

Usage:
    python generate_landmass.py [--seed N] [--width W] [--height H] [--png out.png]
"""

import sys

from py_landmass.config import settings
from py_landmass.core import MIN_DISTANCE, ConfigurationError, LandmassConfig, LandmassGenerator
from py_landmass.logging_config import configure_logging
from py_landmass.render import LogDiagnostics, TileGrid, format_land_map


def save_png(land, seed, filename):
    """Save the land map as an image, north up."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(8, 8 * land.shape[0] / land.shape[1]))
    ax.imshow(land, origin="lower", cmap=ListedColormap(["#2b5d8a", "#6a9a3a"]), interpolation="nearest")
    ax.set_title(f"Seed {seed}")
    ax.set_xticks([])
    ax.set_yticks([])

    plt.tight_layout()
    plt.savefig(filename, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Map image saved as: {filename}")


def main():
    """Main function."""
    import argparse

    parser = argparse.ArgumentParser(description="Generate a landmass map")
    parser.add_argument("--width", type=int, default=settings.default_map_width, help="Map width in cells")
    parser.add_argument("--height", type=int, default=settings.default_map_height, help="Map height in cells")
    parser.add_argument("--noise-scale", type=float, default=settings.noise_scale, help="Noise sampling scale in [0, 1]")
    parser.add_argument("--threshold", type=float, default=settings.threshold, help="Land threshold in [0, 1]")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Map seed, 0 picks a random one")
    parser.add_argument("--min-distance", type=int, default=MIN_DISTANCE, help="Minimum gap between separate landmasses")
    parser.add_argument("--png", help="Also save the map as a PNG image")
    parser.add_argument("--log-format", default="console", choices=["console", "json"], help="Log output format")

    args = parser.parse_args()
    configure_logging(settings.log_level, args.log_format)

    try:
        config = LandmassConfig.from_settings(
            settings,
            width=args.width,
            height=args.height,
            noise_scale=args.noise_scale,
            threshold=args.threshold,
            seed=args.seed,
            min_distance=args.min_distance,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    result = LandmassGenerator(config, render_target=TileGrid(), diagnostics=LogDiagnostics()).generate()

    print(f"Map Seed: {result.seed}")
    print(format_land_map(result.land), end="")
    if result.is_degenerate:
        print("Warning: the generated map has no land", file=sys.stderr)

    if args.png:
        save_png(result.land, result.seed, args.png)


if __name__ == "__main__":
    main()
