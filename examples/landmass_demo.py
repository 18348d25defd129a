#!/usr/bin/env python3
"""
Demo showing the land map after each generation stage.
"""

import matplotlib.pyplot as plt
import numpy as np

from py_landmass.core import (
    NoiseFieldSampler, enforce_minimum_distance, label_regions, remove_protrusions,
)


def main():
    """Run the stages one by one and plot them side by side."""
    print("Py-Landmass Stage Demo")
    print("=" * 40)

    width, height, seed = 80, 60, 424242

    sampler = NoiseFieldSampler(noise_scale=0.1, threshold=0.5, seed=seed)
    sampled = sampler.sample_land_map(width, height)

    region_ids, region_count = label_regions(sampled)
    separated = enforce_minimum_distance(sampled, 4, region_ids=region_ids)

    cleaned = separated.copy()
    removed = remove_protrusions(cleaned)

    print(f"Sampled land cells:   {int(sampled.sum())}")
    print(f"Regions:              {region_count}")
    print(f"After separation:     {int(separated.sum())}")
    print(f"Protrusions removed:  {removed}")
    print(f"Final land cells:     {int(cleaned.sum())}")

    stages = [
        ("Regions", np.ma.masked_equal(region_ids, 0)),
        ("Separated", separated),
        ("Cleaned", cleaned),
    ]

    fig, axes = plt.subplots(1, len(stages), figsize=(15, 5))
    for ax, (title, grid) in zip(axes, stages):
        ax.imshow(grid, origin="lower", interpolation="nearest", cmap="tab20" if title == "Regions" else "Greens")
        ax.set_title(title)
        ax.set_xticks([])
        ax.set_yticks([])

    plt.tight_layout()
    plt.savefig("landmass_stages.png", dpi=150, bbox_inches="tight")
    print("\nStage plot saved as: landmass_stages.png")


if __name__ == "__main__":
    main()
