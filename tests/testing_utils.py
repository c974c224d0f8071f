"""Helpers for tests."""

import functools
import sys

from cssruleset.logger import capture_logs

__all__ = ['assert_no_logs', 'capture_logs']


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function.

    Debug messages are not taken into account.

    """
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs() as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper
