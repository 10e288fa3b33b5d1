"""Encoding orchestration.

This module ties command sources, the encoder and logging together for
the CLI and for batch use.

Key components:
- PathProcessor: Loads commands from documents or fonts and encodes them
"""

from collections.abc import Callable
from pathlib import Path

from pathdata.config import PathDataSettings, get_default_settings
from pathdata.core.encoder import PathEncoder
from pathdata.domain.segment import Segment
from pathdata.exceptions import PathDataError
from pathdata.io import GlyphOutlineReader, read_segments
from pathdata.utils import EncodingLogger, EncodingStats, configure_logging


class PathProcessor:
    """Orchestrates loading and encoding of path commands.

    Example:
        processor = PathProcessor(PathDataSettings())
        d = processor.encode_document(Path("shape.json"))
        print(processor.stats.segments_encoded)
    """

    def __init__(self, config: PathDataSettings | None = None, quiet: bool = False) -> None:
        """Initialize processor with configuration.

        Args:
            config: Settings containing encoder and logging config (defaults apply if None)
            quiet: Suppress console logging except errors
        """
        config = config or get_default_settings()
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.encoding_logger = EncodingLogger(self.logger)
        self.encoder = PathEncoder(config.encoder)

    @property
    def stats(self) -> EncodingStats:
        """Statistics for everything encoded by this processor."""
        return self.encoding_logger.stats

    def encode_segments(self, segments: list[Segment], source: str = "<segments>") -> str:
        """Encode commands and record statistics.

        Args:
            segments: Commands in drawing order
            source: Name of the command source for logging

        Returns:
            Path data text

        Raises:
            PathDataError: If encoding fails under the configured policy
        """
        try:
            d = self.encoder.encode_path(segments)
        except PathDataError as e:
            self.encoding_logger.log_error(source, e)
            raise
        self.encoding_logger.log_path_encoded(source, segments, len(d))
        return d

    def encode_document(self, path: Path) -> str:
        """Load a JSON command document and encode it.

        Args:
            path: Path to the document, or ``-`` for standard input

        Returns:
            Path data text

        Raises:
            DocumentLoadError: If the document cannot be read
            SegmentDecodeError: If the document holds an invalid command
        """
        source = str(path)
        segments = self._load(source, lambda: read_segments(path))
        return self.encode_segments(segments, source=source)

    def encode_glyph(self, font_path: Path, glyph_name: str) -> str:
        """Encode the outline of a glyph.

        Args:
            font_path: Path to the TTF or OTF font file
            glyph_name: Name of the glyph

        Returns:
            Path data text in font units

        Raises:
            FontLoadError: If the font cannot be loaded
            GlyphNotFoundError: If the font has no such glyph
        """
        source = f"{font_path}:{glyph_name}"

        def load() -> list[Segment]:
            with GlyphOutlineReader(font_path) as reader:
                return reader.segments(glyph_name)

        segments = self._load(source, load)
        return self.encode_segments(segments, source=source)

    def _load(self, source: str, loader: Callable[[], list[Segment]]) -> list[Segment]:
        try:
            segments = loader()
        except PathDataError as e:
            self.encoding_logger.log_error(source, e)
            raise
        self.encoding_logger.log_source_loaded(source, len(segments))
        return segments
