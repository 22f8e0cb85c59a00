"""Design I/O layer for linetrack.

This module converts between the compact URL encoding of a design and
domain paths.

Key functions:
- encode_design: Paths to encoded string
- decode_design: Encoded string to paths (best effort)
- extract_design: Pull the encoded design out of a URL
"""

from linetrack.io.design import decode_design, encode_design, extract_design

__all__ = [
    "decode_design",
    "encode_design",
    "extract_design",
]
