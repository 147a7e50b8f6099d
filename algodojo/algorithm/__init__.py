"""A* and binary search, an LRU cache, exact routing solvers and table output."""

__all__ = [
    "a_star",
    "binary_search",
    "lru_cache",
    "traveling_salesman",
    "utility",
    "vehicle_routing",
]