"""netdiagram: network diagrams from tabular observability query results."""

__version__ = "0.1.0"
