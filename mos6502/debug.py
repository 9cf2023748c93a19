"""Hexadecimal trace formatting."""


def format_hex_debug(value: int, msg: str = "") -> str:
    """Return ``msg`` followed by ``value`` in upper-case hex and in decimal."""
    return f"{msg}{value:X} : {value}"


def format_hex(value: int, msg: str = "") -> str:
    """Return ``msg`` followed by ``value`` as a 0x-prefixed upper-case hex number."""
    return f"{msg}0x{value:X}"


def print_hex_debug(value: int, msg: str = "") -> None:
    """Print the hex and decimal form of ``value``."""
    print(format_hex_debug(value, msg))


def print_hex(value: int, msg: str = "") -> None:
    """Print ``value`` as a 0x-prefixed hex number."""
    print(format_hex(value, msg))