"""
Various small helper functions.
"""
import os
import inspect
from typing import Any, Callable, Iterable, Type, Union, Tuple


def get_typename(dtype: Union[Type, Tuple[Type]], multiformat="({})") -> str:
    if inspect.isclass(dtype):
        return dtype.__qualname__
    return multiformat.format(", ".join(sorted(set(t.__qualname__ for t in dtype))))


def check_arg(
    arg: Any,
    argname: str,
    dtype: Union[Type, Iterable[Type]],
    value_ok: Callable[[Any], bool] = None,
):
    """
    Utility function for argument type and value validation.
    Raises a TypeError exception if type(arg) is not in type list given by 'dtype'.
    Raises a ValueError exception if value_ok(arg) is False, where 'value_ok' is a
    boolean function defining a validity criterion.

    For example:
    >>> check_arg('PDF', 'doc_type', str)
    does not raise any exception, as 'PDF' is a str

    >>> check_arg('PDF', 'doc_type', (int, bytes))
    raises TypeError, as first argument is neither an int, nor bytes

    >>> check_arg('', 'doc_type', str, value_ok = len)
    raises ValueError, as first argument is an empty string
    """
    def get_caller():
        stack = inspect.stack()
        return stack[3] if len(stack) > 3 else stack[-1]

    def get_context(caller):
        try:
            context = caller.code_context[0]
        except (TypeError, IndexError):
            context = ""
        return os.path.basename(caller.filename), caller.lineno, context

    # Check type
    if not isinstance(arg, dtype):
        valid = get_typename(dtype, multiformat="one of ({})")
        caller = get_caller()
        raise TypeError("argument '{}' should be {}; got {} {!r}\nIn {}, line #{}: \n{}".format(
            argname, valid, type(arg).__qualname__, arg, *get_context(caller)))
    # Check value
    if callable(value_ok) and not value_ok(arg):
        caller = get_caller()
        raise ValueError("argument {!r} was given invalid value {!r}\nIn {}, line #{}: \n{}".format(
            argname, arg, *get_context(caller)))
