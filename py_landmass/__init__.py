"""
py-landmass: procedural landmass maps from thresholded noise.
"""

__version__ = "0.1.0"
