# robots_scout/encoding.py
"""
Decoding of raw robots.txt content into text before parsing.

UTF-8 is tried first. Anything else goes through charset detection with
``chardet``; a detection below ``min_confidence`` means the content is not
text at all.
"""
from __future__ import annotations

from typing import Final, Union

import chardet

from robots_scout.errors import BinaryInputError, InvalidEncodingError
from robots_scout.logger import logger

__all__ = ["decode_text", "DEFAULT_MIN_CONFIDENCE"]

DEFAULT_MIN_CONFIDENCE: Final[float] = 0.25
_BOM: Final[str] = "\ufeff"


def _detect_and_decode(content: bytes, min_confidence: float) -> str:
    result = chardet.detect(content)
    encoding = result.get("encoding")
    confidence = result.get("confidence") or 0.0
    if encoding is None or confidence < min_confidence:
        logger.warning("robots.txt does not look like text (%s, confidence %.2f)", encoding, confidence)
        raise BinaryInputError("Input does not look like text")

    logger.debug("Detected robots.txt encoding %s (confidence %.2f)", encoding, confidence)
    try:
        return content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        logger.warning("robots.txt is not valid %s: %s", encoding, exc)
        raise InvalidEncodingError("Input looks like text but its encoding is invalid") from exc


def decode_text(
    content: Union[str, bytes], min_confidence: float = DEFAULT_MIN_CONFIDENCE
) -> str:
    """Return *content* as text with a leading byte-order mark removed.

    Raises:
        BinaryInputError: the bytes do not look like text.
        InvalidEncodingError: the detected encoding can not decode the bytes.
    """
    if isinstance(content, bytes):
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError:
            text = _detect_and_decode(content, min_confidence)
    else:
        text = content
    return text[1:] if text.startswith(_BOM) else text
