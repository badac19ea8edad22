"""Classic algorithms and data structures: graphs, dynamic programming, matrix exponentiation, range queries, number theory and strings."""

__version__ = "0.1.0"