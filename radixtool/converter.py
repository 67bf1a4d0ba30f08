import logging
from dataclasses import dataclass
from enum import Enum


logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 32
SUPPORTED_WIDTHS = (8, 16, 32, 64)

DIGITS = "0123456789abcdef"
DIGIT_VALUES = {char: value for value, char in enumerate(DIGITS)}
DIGIT_VALUES.update({char.upper(): value for char, value in DIGIT_VALUES.items()})


class Base(Enum):
    BIN = (2, "0b", "Bin", 1)
    OCT = (8, "0o", "Oct", 3)
    DEC = (10, "", "Dec", None)
    HEX = (16, "0x", "Hex", 4)

    def __init__(self, radix: int, prefix: str, label: str, bits_per_digit: int | None):
        self.radix = radix
        self.prefix = prefix
        self.label = label
        self.bits_per_digit = bits_per_digit

    @property
    def digits(self) -> str:
        return DIGITS[:self.radix]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Base":
        for base in cls:
            if base.prefix and base.prefix == prefix:
                return base
        raise UnknownPrefixError(prefix)


class ConversionError(ValueError):
    """Base class for numerals that cannot be converted."""


class UnknownPrefixError(ConversionError):
    def __init__(self, numeral: str):
        self.numeral = numeral
        super().__init__(f"'{numeral}' has an unknown base prefix '{numeral[:2]}'.")


class InvalidDigitError(ConversionError):
    def __init__(self, numeral: str, char: str, base: Base):
        self.numeral = numeral
        self.char = char
        self.base = base
        super().__init__(
            f"'{char}' in '{numeral}' is not a valid digit in base {base.radix}."
        )


class NumeralOverflowError(ConversionError):
    def __init__(self, numeral: str, width: int):
        self.numeral = numeral
        self.width = width
        super().__init__(f"'{numeral}' does not fit in {width} bits.")


@dataclass(frozen=True)
class Rendering:
    magnitude: int
    pattern: int
    negative: bool = False


def _limit(width: int) -> int:
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(
            f"Only these widths are supported: {', '.join(map(str, SUPPORTED_WIDTHS))}."
        )
    return (1 << width) - 1


def split_prefix(numeral: str) -> tuple[Base, str]:
    """Return the base a numeral is written in and its digits without the prefix."""
    lead = numeral[:2]
    if lead in ("0b", "0o", "0x"):
        return Base.from_prefix(lead), numeral[2:]
    if len(lead) == 2 and lead[0] == "0" and lead[1] not in DIGITS[:10]:
        raise UnknownPrefixError(numeral)
    return Base.DEC, numeral


def parse(numeral: str, width: int = DEFAULT_WIDTH) -> int:
    """Decode a numeral into an unsigned integer of at most `width` bits.

    The base comes from the `0b`, `0o` or `0x` prefix; unprefixed numerals
    are decimal. A numeral made only of a prefix, or an empty string,
    decodes to 0.

    Raises:
        UnknownPrefixError: for a `0` followed by an unrecognised letter.
        InvalidDigitError: for a character that is not a digit of the base.
        NumeralOverflowError: when the value needs more than `width` bits.
    """
    limit = _limit(width)
    base, body = split_prefix(numeral)

    result = 0
    power = 1
    for char in reversed(body):
        digit = DIGIT_VALUES.get(char)
        if digit is None or digit >= base.radix:
            raise InvalidDigitError(numeral, char, base)
        if digit:
            if power > limit:
                raise NumeralOverflowError(numeral, width)
            term = digit * power
            if term > limit or result + term > limit:
                raise NumeralOverflowError(numeral, width)
            result += term
        if power <= limit:
            power *= base.radix

    logger.debug("parsed %r as base %d -> %d", numeral, base.radix, result)
    return result


def format_value(value: int, base: Base) -> str:
    """Encode a non-negative integer as digits of `base`, without prefix."""
    if value < 0:
        raise ValueError(f"Cannot format negative value {value}; negate it first.")

    digits = []
    while value > 0:
        value, digit = divmod(value, base.radix)
        digits.append(DIGITS[digit])

    if not digits:
        return "0"
    return "".join(reversed(digits))


def is_negative(numeral: str) -> bool:
    """Probe the leading digit of a prefixed numeral for a set sign bit.

    Decimal numerals carry no sign bit and are never negative here; the
    caller decides whether a decimal magnitude is to be read as negative.
    """
    base, body = split_prefix(numeral)
    if not body:
        return False

    lead = DIGIT_VALUES.get(body[0])
    if lead is None:
        return False
    if base is Base.BIN:
        return lead == 1
    if base is Base.OCT:
        return lead > 4
    if base is Base.HEX:
        return lead > 7
    return False


def sign_extend(value: int, bits: int, width: int = DEFAULT_WIDTH) -> int:
    limit = _limit(width)
    if bits >= width:
        return value & limit
    return value | (limit ^ ((1 << bits) - 1))


def twos_complement_negate(value: int, source_negative: bool, width: int = DEFAULT_WIDTH) -> int:
    """Negate `value` in two's complement and trim the sign extension.

    The complement is taken at the full `width`. The run of leading ones it
    produces is then cut down to a single sign bit when `source_negative`
    is set, or removed entirely otherwise.
    """
    limit = _limit(width)
    if not 0 <= value <= limit:
        raise NumeralOverflowError(str(value), width)

    complement = format_value((~value + 1) & limit, Base.BIN).zfill(width)
    trimmed = complement.lstrip("1")
    if source_negative and len(trimmed) < len(complement):
        trimmed = "1" + trimmed

    logger.debug(
        "negated %s -> %s (%d bits, source negative: %s)",
        format_value(value, Base.BIN), trimmed or "0", width, source_negative,
    )
    return parse(Base.BIN.prefix + trimmed, width)


def interpret(numeral: str, signed: bool = False, width: int = DEFAULT_WIDTH) -> Rendering:
    """Read a numeral as an unsigned value or a two's-complement signed one."""
    value = parse(numeral, width)
    if not signed:
        return Rendering(magnitude=value, pattern=value)

    base, body = split_prefix(numeral)
    if base is Base.DEC:
        if value == 0:
            return Rendering(magnitude=0, pattern=0)
        if value > 1 << (width - 1):
            raise NumeralOverflowError(f"-{numeral}", width)
        pattern = twos_complement_negate(value, True, width)
        return Rendering(magnitude=value, pattern=pattern, negative=True)

    if not is_negative(numeral):
        return Rendering(magnitude=value, pattern=value)

    extended = sign_extend(value, len(body) * base.bits_per_digit, width)
    magnitude = twos_complement_negate(extended, True, width)
    return Rendering(magnitude=magnitude, pattern=value, negative=True)


def _pattern_digits(pattern: int, base: Base) -> str:
    bits = format_value(pattern, Base.BIN)
    step = base.bits_per_digit
    if len(bits) % step:
        bits = "1" * (step - len(bits) % step) + bits

    digits = format_value(int(bits, 2), base)
    while not is_negative(base.prefix + digits):
        bits = "1" * step + bits
        digits = format_value(int(bits, 2), base)
    return digits


def render(
    numeral: str,
    base: Base,
    signed: bool = False,
    width: int = DEFAULT_WIDTH,
    prefix: bool = False,
    upper: bool = False,
) -> str:
    """Convert a numeral to text in `base`.

    Decimal output of a negative signed value carries a `-`; the other bases
    show the two's-complement pattern, widened so its leading digit still
    reads as negative.
    """
    rendering = interpret(numeral, signed=signed, width=width)

    if base is Base.DEC:
        digits = format_value(rendering.magnitude, base)
        sign = "-" if rendering.negative else ""
    elif rendering.negative:
        digits = _pattern_digits(rendering.pattern, base)
        sign = ""
    else:
        digits = format_value(rendering.pattern, base)
        sign = ""

    if upper:
        digits = digits.upper()
    if prefix:
        digits = base.prefix + digits
    return sign + digits
