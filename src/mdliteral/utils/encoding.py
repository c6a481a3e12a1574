#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/utils/encoding.py
"""Character encoding detection for markdown input.

Markdown read from files or byte streams is decoded as UTF-8 when possible.
Other inputs are decoded with the encoding chardet reports, and finally with
latin-1, which accepts every byte sequence.
"""

from __future__ import annotations

import logging
from typing import IO

import chardet

logger = logging.getLogger(__name__)

# utf-8-sig also decodes plain UTF-8, dropping a leading byte order mark
DEFAULT_FALLBACK_ENCODINGS = ("utf-8-sig",)


def detect_encoding(data: bytes, sample_size: int = 8192, confidence_threshold: float = 0.7) -> str | None:
    """Detect the character encoding of binary data.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes used for detection
    confidence_threshold : float, default 0.7
        Minimum chardet confidence required to trust the result

    Returns
    -------
    str | None
        Detected encoding name, or None when detection is inconclusive

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        return None
    return encoding


def read_text_with_encoding_detection(data: bytes) -> str:
    """Decode binary data as text.

    UTF-8 (with or without a byte order mark) is tried first, then the
    encoding detected by chardet, then latin-1.

    Parameters
    ----------
    data : bytes
        Binary data to decode

    Returns
    -------
    str
        Decoded text

    Examples
    --------
    >>> read_text_with_encoding_detection("café".encode("utf-8"))
    'café'

    """
    for encoding in DEFAULT_FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue

    detected = detect_encoding(data)
    if detected:
        try:
            return data.decode(detected)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Detected encoding {detected} failed to decode input")

    logger.warning("Could not determine input encoding, decoding as latin-1")
    return data.decode("latin-1")


def normalize_stream_to_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a text or binary stream and return its decoded contents."""
    content = stream.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    return content
