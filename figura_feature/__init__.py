"""
figura_feature - decode one shape record and render it

Architecture:
- RecordDecoder: Orchestrator (kind tag -> variant -> parameters -> held record)
- FeatureConfig: Configuration management (YAML)
- run(): Wires factory, source, decoder and renderer; returns exit status
"""

from figura_feature.decoder import RecordDecoder, DecodeResult, DecodedRecord
from figura_feature.config import FeatureConfig, RenderConfig
from figura_feature.runner import run, build_factory, build_renderer, write_record

__all__ = [
    "RecordDecoder",
    "DecodeResult",
    "DecodedRecord",
    "FeatureConfig",
    "RenderConfig",
    "run",
    "build_factory",
    "build_renderer",
    "write_record",
]
