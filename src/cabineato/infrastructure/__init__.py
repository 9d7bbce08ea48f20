"""Infrastructure layer - serialization of generated assemblies."""

from .json_exporter import AssemblyJsonExporter, feature_to_dict

__all__ = ["AssemblyJsonExporter", "feature_to_dict"]
