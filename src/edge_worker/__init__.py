"""
edge_worker — HTTP request pipeline for an edge-deployed worker.

Parses each request into a typed route, threads it through a chain of
middleware that can short-circuit, dispatches to a handler, and maps every
outcome to an HTTP response.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
