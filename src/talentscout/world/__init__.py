"""Static world data used by the simulation."""

from .countries import NEIGHBORS, Country, asymmetric_edges, build_adjacency, is_neighbor, neighbors_of, normalize_country

__all__ = [
    "NEIGHBORS",
    "Country",
    "asymmetric_edges",
    "build_adjacency",
    "is_neighbor",
    "neighbors_of",
    "normalize_country",
]
