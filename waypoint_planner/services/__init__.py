"""Service layer package.

Exports workflows consumed by the planner facade.
"""

from .polygon_import import PolygonImportConfig, PolygonImportService

__all__ = ["PolygonImportConfig", "PolygonImportService"]
