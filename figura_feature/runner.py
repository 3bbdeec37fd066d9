"""
Runner - wires factory, source, decoder and renderer for one record.

Process contract:
  - decode exactly one record from the configured source
  - attempt one render
  - exit status 0 if a valid record is held, 1 otherwise

An input file that cannot be opened counts as a failed decode.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from figura_feature.config import FeatureConfig, RenderConfig
from figura_feature.decoder import RecordDecoder
from figura_io.codec import RecordLayout, write_records
from figura_io.sources import FileByteSource, ScriptedByteSource
from figura_logging import LogEvent, create_logger
from figura_render import ConsoleRenderer, NullRenderer, RasterRenderer, RenderTarget
from figura_shapes import DEFAULT_VARIANTS, ShapeFactory, ShapeKind, kind_name
from figura_feature.paths import get_target_run_folder


def build_factory(log_level: int = logging.INFO) -> ShapeFactory:
    """Factory with the default variants registered in order."""
    factory = ShapeFactory(logger=create_logger("registry", level=log_level))
    result = factory.register_variants(*DEFAULT_VARIANTS)
    if not result:
        factory.logger.warning(
            event=LogEvent.REGISTRY_DUPLICATE,
            message="Default variant list contains duplicate kinds",
            metadata={'rejected': list(result.rejected)},
        )
    return factory


def build_renderer(render_config: RenderConfig, test_mode: bool = False) -> RenderTarget:
    """Render target for the configured backend (console in test mode)."""
    if test_mode or render_config.backend == "console":
        return ConsoleRenderer()
    if render_config.backend == "raster":
        return RasterRenderer(
            resolution_wh=render_config.resolution_wh,
            scale=render_config.scale,
            origin=render_config.origin,
            thickness=render_config.thickness,
        )
    return NullRenderer()


def run(config: FeatureConfig) -> int:
    """
    Decode one record and render it.

    Returns:
        Process exit status (0 valid record, 1 otherwise)
    """
    level = config.logging_level
    logger = create_logger("runner", level=level)

    decoder = RecordDecoder(
        build_factory(level),
        layout=config.layout,
        logger=create_logger("decoder", level=level),
    )
    renderer = build_renderer(config.render, test_mode=config.test_mode)

    if config.test_mode:
        decoder.decode(ScriptedByteSource(layout=config.layout))
    else:
        try:
            source = FileByteSource(config.input_path)
        except OSError as e:
            logger.error(
                event=LogEvent.SOURCE_OPEN_FAILED,
                message=f"Cannot open input: {config.input_path}",
                metadata={'path': str(config.input_path)},
                exc_info=e,
            )
        else:
            with source:
                logger.debug(
                    event=LogEvent.SOURCE_OPENED,
                    message=f"Opened {config.input_path}",
                    metadata={'path': str(config.input_path)},
                )
                decoder.decode(source)

    decoder.render(renderer)

    if isinstance(renderer, RasterRenderer) and not decoder.is_valid():
        logger.warning(
            event=LogEvent.RENDER_SKIPPED,
            message="No valid record held, canvas not written",
            metadata={'input_path': str(config.input_path)},
        )
    elif isinstance(renderer, RasterRenderer):
        output_path = config.render.output_path or (
            get_target_run_folder("figura") / "render.png"
        )
        written = renderer.save(output_path)
        logger.info(
            event=LogEvent.RENDER_SAVED,
            message=f"Canvas written to {written}",
            metadata={'path': str(written)},
        )

    return 0 if decoder.is_valid() else 1


def parse_kind(value: str) -> int:
    """Kind from a name ("circle") or an integer tag ("2")."""
    try:
        return ShapeKind[value.upper()]
    except KeyError:
        pass
    try:
        return int(value)
    except ValueError:
        names = ", ".join(kind.name.lower() for kind in ShapeKind)
        raise ValueError(f"Unknown kind '{value}'. Use an integer or one of: {names}")


def write_record(
    path: str | Path,
    kind: int,
    params: Sequence[float],
    layout: RecordLayout = RecordLayout(),
    factory: Optional[ShapeFactory] = None,
) -> int:
    """
    Write a single record file.

    Registered kinds must be given exactly their parameter count.

    Returns:
        Number of bytes written

    Raises:
        ValueError: If the parameter count does not match the kind
    """
    factory = factory or build_factory()
    variant = factory.create(kind)
    if variant is not None and len(params) != variant.param_count:
        raise ValueError(
            f"Kind '{kind_name(variant.kind).lower()}' takes "
            f"{variant.param_count} parameters, got {len(params)}"
        )
    return write_records(path, [(kind, params)], layout)
