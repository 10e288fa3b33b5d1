"""Core encoding and processing for pathdata.

Key components:
- PathEncoder: Renders path commands as path data text
- encode_segment / encode_path: Encoding with default formatting
- PathProcessor: Loads command sources and encodes them with logging
"""

from pathdata.core.encoder import (
    PathEncoder,
    encode_path,
    encode_segment,
    format_flag,
    format_number,
)
from pathdata.core.processor import PathProcessor

__all__ = [
    "PathEncoder",
    "PathProcessor",
    "encode_path",
    "encode_segment",
    "format_flag",
    "format_number",
]
