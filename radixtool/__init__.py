"""Convert integers between binary, octal, decimal and hexadecimal."""

from .__about__ import APP_NAME, APP_TITLE, __version__
from .converter import (
    DEFAULT_WIDTH,
    SUPPORTED_WIDTHS,
    Base,
    ConversionError,
    InvalidDigitError,
    NumeralOverflowError,
    Rendering,
    UnknownPrefixError,
    format_value,
    interpret,
    is_negative,
    parse,
    render,
    sign_extend,
    twos_complement_negate,
)

__all__ = [
    "APP_NAME", "APP_TITLE", "__version__",
    "DEFAULT_WIDTH", "SUPPORTED_WIDTHS",
    "Base", "Rendering",
    "ConversionError", "InvalidDigitError", "NumeralOverflowError", "UnknownPrefixError",
    "format_value", "interpret", "is_negative", "parse", "render",
    "sign_extend", "twos_complement_negate",
]
