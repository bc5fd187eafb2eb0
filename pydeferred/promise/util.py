# -*- coding: utf-8 -*-


def is_thenable(value):
    """Check if an object can be chained, like a Promise, or is a "result".

    Returns:
        boolean: True if the value has an attribute 'then' who is callable.
            False if not.
    """
    return hasattr(getattr(value, 'then', None), '__call__')


def is_promise(value):
    """Check if an object is a Promise, or a Deferred wrapping one.

    The pipe operator uses this function to ensure a pipe function returned
    something it can observe.

    Args:
        value: object to test.
    Returns:
        boolean: True if it's a Promise or a Deferred; False otherwise.
    """
    from .deferred import Deferred
    from .promise import Promise

    return isinstance(value, (Promise, Deferred))


def get_promise(value):
    """Returns the Promise of a Deferred, or the value itself otherwise."""
    from .deferred import Deferred

    if isinstance(value, Deferred):
        return value.promise
    return value
