"""Nuclear graphs, cluster and bond-based fragmenters, and GMBE weights."""

__version__ = "0.0.1"