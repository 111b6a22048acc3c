"""
boilerplate: template-based file generator.

Layers:
- domain/    → errors, schemas, constants
- core/      → settings, run log, atomic IO, ids
- templates/ → loader, path resolution, planning, substitution, emitting
- cli.py     → command-line entry point
"""

__version__ = "0.1.0"
