"""
Conversion of raw text tokens into values of a requested kind. A kind is
either str, a numpy dtype or dtype name, or any callable taking the token
text, such as int, float or np.int32. Numeric kinds only accept plain ascii
numbers, without digit separators.
"""

import numbers

import numpy as np

from _turboinput.errors import ParseMismatchError

_bool_literals = {"true": True, "false": False}


def parse_bool(token):
    """
    Parses the literals "true" and "false".

    bool(token) is True for any non-empty token, so
    bool and np.bool_ are not usable as converters.
    """
    try:
        return _bool_literals[token]
    except KeyError as err:
        raise ValueError(f"{repr(token)} is not one of true, false") from err


# Converters used in place of calling the kind itself
special_converters = {
    bool: parse_bool,
    np.bool_: lambda token: np.bool_(parse_bool(token)),
}


def resolve_kind(kind):
    """
    numpy dtypes, and names of dtypes such as "int32",
    resolve to the numpy scalar type.
    """
    if isinstance(kind, np.dtype) or not callable(kind):
        return np.dtype(kind).type
    return kind


def is_numeric(kind):
    return isinstance(kind, type) and issubclass(kind, (numbers.Number, np.number))


def kind_name(kind):
    if isinstance(kind, (np.dtype, str)):
        return str(kind)
    return getattr(kind, "__name__", repr(kind))


def parse_token(token, kind=str, line=None):
    """
    Converts a token to the given kind, ie. parse_token("42", int) == 42.

    :param token: The token text.
    :param kind: str, a numpy dtype or dtype name, or a callable
        taking the token text.
    :param line: The line number the token was read from, only used
        in the error message.
    :raises ParseMismatchError: If the token could not be converted.
    :raises TypeError: If kind is neither callable nor a dtype.
    """
    if kind is str:
        return token
    resolved = resolve_kind(kind)
    converter = special_converters.get(resolved, resolved)
    try:
        # int and float also accept digit separators and non-ascii digits
        if is_numeric(resolved) and ("_" in token or not token.isascii()):
            raise ValueError(f"{repr(token)} is not a plain ascii number")
        return converter(token)
    except (ValueError, ArithmeticError) as err:
        location = "" if line is None else f" on line {line}"
        raise ParseMismatchError(
            f"Could not parse token {repr(token)} as {kind_name(kind)}{location}",
            token,
            kind,
            line,
        ) from err
