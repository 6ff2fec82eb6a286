"""Order management core: data access, aggregation and service layers."""

__version__ = "1.0.0"
