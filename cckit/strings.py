"""String helpers: prefix/suffix checks, trimming, case, splitting and encodings.

Text is handled as ``str``; encoded data is handled as ``bytes``. Case
operations only touch ASCII letters, so other characters pass through
unchanged.
"""

from __future__ import annotations

import codecs
import locale
import string
from enum import IntEnum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DEFAULT_TRIM_CHARS = " \t\n\r\f\v"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class SplitMode(IntEnum):
    """How :func:`split` treats empty tokens."""

    KEEP_ALL = 0
    TRIM_TRAILING = 1
    SKIP_ALL = 2


# ----------------------------------------------------------------------
# Basic operations
# ----------------------------------------------------------------------


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_TO_UPPER)


def starts_with(text: str, prefix: str, ignore_case: bool = False) -> bool:
    if ignore_case:
        return to_lower(text).startswith(to_lower(prefix))
    return text.startswith(prefix)


def ends_with(text: str, suffix: str, ignore_case: bool = False) -> bool:
    if ignore_case:
        return to_lower(text).endswith(to_lower(suffix))
    return text.endswith(suffix)


def trim(text: str, chars_to_remove: str = DEFAULT_TRIM_CHARS,
         remove_middle_chars: bool = False) -> str:
    """Strip ``chars_to_remove`` from both ends.

    With ``remove_middle_chars`` every occurrence of those characters is
    removed, wherever it stands.
    """
    if not chars_to_remove:
        return text
    if remove_middle_chars:
        return text.translate({ord(ch): None for ch in chars_to_remove})
    return text.strip(chars_to_remove)


def equals(s1: str, s2: str, ignore_case: bool = False) -> bool:
    if ignore_case:
        return to_lower(s1) == to_lower(s2)
    return s1 == s2


def split(text: str, delimiter: str,
          mode: SplitMode = SplitMode.TRIM_TRAILING) -> list[str]:
    """Split ``text`` on ``delimiter``.

    KEEP_ALL keeps every empty token, TRIM_TRAILING drops the empty tokens
    at the end, SKIP_ALL drops all empty tokens. Raises ValueError for an
    empty delimiter or an unknown mode.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    mode = SplitMode(mode)
    tokens = text.split(delimiter)
    if mode is SplitMode.SKIP_ALL:
        return [token for token in tokens if token]
    if mode is SplitMode.TRIM_TRAILING:
        while tokens and not tokens[-1]:
            tokens.pop()
    return tokens


def is_valid_utf8(data: Union[str, BytesLike]) -> bool:
    """Whether ``data`` is well-formed UTF-8 (or text that can be encoded as it)."""
    try:
        if isinstance(data, str):
            data.encode("utf-8")
        else:
            bytes(data).decode("utf-8")
    except UnicodeError:
        return False
    return True


# ----------------------------------------------------------------------
# Encoding conversion
# ----------------------------------------------------------------------


def _codec(name: str) -> str:
    """Resolve a codec name; an empty name means the system default."""
    if not name:
        name = locale.getpreferredencoding(False)
    return codecs.lookup(name).name


def _decode(data: Union[str, BytesLike], encoding: str) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode(_codec(encoding))


def to_utf8(text: str) -> bytes:
    return text.encode("utf-8")


def from_utf8(data: BytesLike) -> str:
    """Decode UTF-8 bytes; raises UnicodeDecodeError if malformed."""
    return _decode(data, "utf-8")


def to_gbk(text: str) -> bytes:
    return text.encode("gbk")


def to_gb2312(text: str) -> bytes:
    return text.encode("gb2312")


def to_gb18030(text: str) -> bytes:
    return text.encode("gb18030")


def from_gbk(data: BytesLike) -> str:
    return _decode(data, "gbk")


def from_gb2312(data: BytesLike) -> str:
    return _decode(data, "gb2312")


def from_gb18030(data: BytesLike) -> str:
    return _decode(data, "gb18030")


def convert(data: Union[str, BytesLike], from_code: str, to_code: str) -> bytes:
    """Re-encode ``data`` from ``from_code`` to ``to_code``.

    Text given as ``str`` is taken as already decoded. An empty codec name
    stands for the system default. Raises LookupError for an unknown codec
    and UnicodeError when the data cannot be converted.
    """
    target = _codec(to_code)
    if isinstance(data, str):
        _codec(from_code)
        return data.encode(target)
    return _decode(data, from_code).encode(target)


# ----------------------------------------------------------------------
# Wide strings
# ----------------------------------------------------------------------


def utf8_to_wchars(data: BytesLike) -> str:
    """Decode UTF-8 bytes into a string of code points."""
    return _decode(data, "utf-8")


def wchars_to_utf8(text: str) -> bytes:
    return text.encode("utf-8")