"""Export module for PixelTrack"""

from .exporter import ExportResult, ExportSummary, StatsExporter, write_export

__all__ = ["ExportResult", "ExportSummary", "StatsExporter", "write_export"]
