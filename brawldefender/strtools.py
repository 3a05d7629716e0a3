"""String and number helpers used throughout the game."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from string import ascii_letters, ascii_lowercase, digits

_UINT_MODULO = 2**32
_SQRT_STEP = 3200


def getnbr(text: str) -> int:
    """Read the first integer in ``text``.

    Any run of signs and other characters may come before the digits; each
    '-' flips the sign, '+' is ignored and any other character resets it.
    """
    negatives = 0
    chars = iter(text)
    first_digit = None
    for char in chars:
        if char in digits:
            first_digit = char
            break
        if char == "-":
            negatives += 1
        elif char != "+":
            negatives = 0
    if first_digit is None:
        raise ValueError(f"no number found in {text!r}")
    number_chars = [first_digit]
    for char in chars:
        if char not in digits:
            break
        number_chars.append(char)
    total = int("".join(number_chars))
    return -total if negatives % 2 else total


def nbr_len(number: int) -> int:
    """Count the decimal digits of a non-negative number; negatives give 0."""
    if number == 0:
        return 1
    if number < 0:
        return 0
    return len(str(number))


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; a negative exponent gives 0."""
    if exponent == 0:
        return 1
    if exponent < 0:
        return 0
    return base**exponent


def square_root(number: int) -> float:
    """Approximate a square root with integer Newton steps.

    Numbers of at least 3200 get ``number // 3200`` steps starting from 1;
    smaller numbers are iterated until the estimate settles.
    """
    if number < 1:
        raise ValueError("square_root needs a positive number")
    root = 1
    steps = number // _SQRT_STEP
    if steps >= 1:
        for _ in range(steps):
            root = (number // root + root) // 2
        return float(root)
    root = (number // root + root) // 2
    while True:
        candidate = (number // root + root) // 2
        if candidate >= root:
            return float(root)
        root = candidate


def str_to_word_array(text: str, separator: str) -> list[str]:
    """Split ``text`` on runs of ``separator``, ignoring leading separators.

    A trailing separator leaves an empty last word, as does empty input.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    rest = text.lstrip(separator)
    return re.split(f"{re.escape(separator)}+", rest)


def clean_str(text: str, undesirable: str) -> str:
    """Return ``text`` without any occurrence of ``undesirable``."""
    if len(undesirable) != 1:
        raise ValueError("undesirable must be a single character")
    return text.replace(undesirable, "")


def clean_arr(items: list[str], undesirable: str) -> list[str]:
    """Apply :func:`clean_str` to every string of ``items``."""
    return [clean_str(item, undesirable) for item in items]


def rm_from_array(items: list[str], index: int) -> list[str]:
    """Return a copy of ``items`` without the element at ``index``."""
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range")
    return items[:index] + items[index + 1:]


def str_isalpha(text: str) -> bool:
    """Tell whether every character is an ASCII letter."""
    return all(char in ascii_letters for char in text)


def str_isnum(text: str) -> bool:
    """Tell whether every character is an ASCII digit."""
    return all(char in digits for char in text)


def str_is_alphanumeric(text: str) -> bool:
    """Tell whether every character is a digit or a lower-case ASCII letter."""
    allowed = set(digits) | set(ascii_lowercase)
    return all(char in allowed for char in text)


def _to_base(number: int, base: int, alphabet: str, stop: int) -> str:
    out = []
    while number > stop:
        number, remainder = divmod(number, base)
        out.append(alphabet[remainder])
    return "".join(reversed(out))


def to_binary(number: int) -> str:
    """Binary digits of a positive number; zero and negatives give ''."""
    return _to_base(number, 2, "01", 0)


def to_octal(number: int) -> str:
    """Octal digits of a positive number; zero and negatives give ''."""
    return _to_base(number, 8, "01234567", 0)


def to_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``number``.

    Conversion stops once the quotient reaches 1, so a leading digit '1'
    is never written. Upper-case output treats the number as a 32-bit
    unsigned value; lower-case output of a non-positive number is ''.
    """
    if upper:
        return _to_base(number % _UINT_MODULO, 16, "0123456789ABCDEF", 1)
    return _to_base(number, 16, "0123456789abcdef", 1)


def format_printf(fmt: str, *args: object) -> str:
    """Format ``fmt`` with the %s %c %d %i %b %o %x %X %u %e %% directives.

    ``%e`` writes its argument to standard error instead of the result.
    Unknown directives produce nothing and consume no argument.
    """
    values = iter(args)

    def take() -> object:
        try:
            return next(values)
        except StopIteration:
            raise ValueError("not enough arguments for format") from None

    out: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            out.append("%")
        elif spec == "s":
            out.append(str(take()))
        elif spec == "c":
            value = take()
            out.append(chr(value) if isinstance(value, int) else str(value))
        elif spec in ("d", "i"):
            out.append(str(int(take())))
        elif spec == "b":
            out.append(to_binary(int(take())))
        elif spec == "o":
            out.append(to_octal(int(take())))
        elif spec == "x":
            out.append(to_hex(int(take())))
        elif spec == "X":
            out.append(to_hex(int(take()), upper=True))
        elif spec == "u":
            out.append(str(int(take()) % _UINT_MODULO))
        elif spec == "e":
            sys.stderr.write(str(take()))
    return "".join(out)


def str_as_numbers(text: str) -> str:
    """Concatenate the signed byte value of every UTF-8 byte of ``text``."""
    return "".join(
        str(byte - 256 if byte > 127 else byte) for byte in text.encode("utf-8")
    )


def extract_str(path: str | Path) -> str:
    """Return the whole content of the file at ``path``."""
    return Path(path).read_text()