"""
Assertions on raised exceptions.

Unlike ``pytest.raises``, these helpers require the exact exception type
(subclasses do not match) and compare whole messages, so that tests pin
down the error contract of an API rather than just its error family.

The cause of an exception is its ``__cause__`` (set by ``raise ... from``)
or, failing that, its ``__context__``.
"""

import re
from typing import Callable, Optional, Type

from ._utils import assert_equal, fail

#: Partial message expected when a required argument is None.
NONE_PARTIAL_MESSAGE = "Value cannot be None."

_PARAMETER_SUFFIX = re.compile(r" \(Parameter '(?P<name>[^']*)'\)$")


def _raised_by(action: Callable[[], object]) -> BaseException:
    try:
        action()
    except Exception as e:  # pylint: disable=broad-except
        return e
    fail("An expected exception has not been thrown.")


def _cause_of(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    return error.__context__


def _assert_exception(error: BaseException,
                      expected_type: Type[BaseException],
                      expected_message: Optional[str],
                      what: str):
    if expected_message is not None:
        assert_equal(expected_message, str(error), f"Wrong {what} message.")
    assert_equal(expected_type, type(error), f"Wrong {what} type.")


def assert_raises(action: Callable[[], object],
                  expected_type: Type[BaseException],
                  expected_message: Optional[str] = None) -> BaseException:
    """
    Assert that calling ``action`` raises an exception of exactly the given type.

    Parameters
    ----------
    action : callable
        Zero-argument callable expected to raise
    expected_type : type
        Expected exception type
    expected_message : str, optional
        Expected ``str()`` of the exception; not checked if omitted

    Returns
    -------
    BaseException
        The raised exception, for further inspection

    Examples
    --------
    >>> assert_raises(lambda: int("x"), ValueError,
    ...               "invalid literal for int() with base 10: 'x'")
    """
    if expected_type is None:
        raise ValueError("expected_type cannot be None")
    error = _raised_by(action)
    _assert_exception(error, expected_type, expected_message, "exception")
    return error


def assert_raises_with_cause(action: Callable[[], object],
                             expected_type: Type[BaseException],
                             expected_message: Optional[str],
                             expected_cause_type: Type[BaseException],
                             expected_cause_message: Optional[str]) -> BaseException:
    """Assert that ``action`` raises the expected exception, caused by the expected one."""
    error = _raised_by(action)
    cause = _cause_of(error)
    if cause is None:
        fail("An expected exception has not been caused by the expected inner one.")
    _assert_exception(error, expected_type, expected_message, "exception")
    _assert_exception(cause, expected_cause_type, expected_cause_message, "cause")
    return error


def assert_cause_raises(action: Callable[[], object],
                        expected_cause_type: Type[BaseException],
                        expected_cause_message: Optional[str]) -> BaseException:
    """Assert that ``action`` raises an exception caused by the expected one."""
    error = _raised_by(action)
    cause = _cause_of(error)
    if cause is None:
        fail("An expected exception has not been caused by the expected inner one.")
    _assert_exception(cause, expected_cause_type, expected_cause_message, "cause")
    return cause


def parameter_name(error: BaseException) -> Optional[str]:
    """
    Name of the argument an error refers to.

    Read from a ``param_name`` attribute if the exception has one, otherwise
    parsed from a trailing ``(Parameter '<name>')`` in its message.
    """
    name = getattr(error, 'param_name', None)
    if name is not None:
        return name
    match = _PARAMETER_SUFFIX.search(str(error))
    return match.group('name') if match else None


def assert_argument_error(action: Callable[[], object],
                          expected_type: Type[BaseException],
                          expected_partial_message: str,
                          expected_parameter_name: Optional[str] = None) -> BaseException:
    """
    Assert that ``action`` rejects one of its arguments.

    The expected message is ``expected_partial_message`` followed, when a
    parameter name is given, by `` (Parameter '<name>')``. Only
    ``ValueError`` and ``TypeError`` (and their subclasses) are caught;
    other exceptions propagate.

    Examples
    --------
    >>> def scale(factor):
    ...     if factor is None:
    ...         raise TypeError(f"{NONE_PARTIAL_MESSAGE} (Parameter 'factor')")
    >>> assert_argument_error(lambda: scale(None), TypeError,
    ...                       NONE_PARTIAL_MESSAGE, "factor")
    """
    if expected_type is None:
        raise ValueError("expected_type cannot be None")
    if expected_partial_message is None:
        raise ValueError("expected_partial_message cannot be None")

    expected_message = expected_partial_message
    if expected_parameter_name is not None:
        expected_message += f" (Parameter '{expected_parameter_name}')"

    try:
        action()
    except (ValueError, TypeError) as e:
        error = e
    else:
        fail("An expected exception has not been thrown.")

    assert_equal(expected_message, str(error), "Wrong exception message.")
    assert_equal(expected_type, type(error), "Wrong exception type.")
    assert_equal(expected_parameter_name, parameter_name(error), "Wrong parameter name.")
    return error
