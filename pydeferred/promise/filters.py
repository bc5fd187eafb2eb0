# -*- coding: utf-8 -*-

"""Functions used to chain a new Promise to an existing one.

A *filter* transforms synchronously a value of a Promise into the value of
the chained Promise. A *pipe* receives the value and returns another Promise,
whose outcome settles the chained Promise.

Each kind of value (done, fail, progress) has its own wrapper class, so
`Promise.then()` can tell a filter from a pipe, and a pipe from a simple
callback. The wrappers accept a callable, or can be subclassed by overriding
the `filter()` or `pipe()` method.

Example:

    >>> p = Promise.resolve(3).then(DoneFilter(lambda v: v * 10))
    >>> p.result()
    30
"""


class _Filter(object):

    def __init__(self, func=None):
        """
        Args:
            func (callable, optional): the transformation. If not set, the
                value is transmitted unchanged.
        """
        if func is not None and not callable(func):
            raise TypeError('%s requires a callable, not %r'
                            % (type(self).__name__, func))
        self._func = func

    def filter(self, value):
        if self._func is None:
            return value
        return self._func(value)

    @property
    def name(self):
        if self._func is None:
            return type(self).__name__
        return getattr(self._func, '__name__', type(self).__name__)

    @classmethod
    def wrap(cls, value):
        """Convert a callable (or None) into a filter of this class.

        Returns:
            the identity filter NO_OP if value is None, value itself if it's
            already an instance of this class, a new instance otherwise.
        """
        if value is None:
            return cls.NO_OP
        if isinstance(value, cls):
            return value
        return cls(value)


class DoneFilter(_Filter):
    """Transforms the result of a resolved Promise."""
    pass


class FailFilter(_Filter):
    """Transforms the reason of a rejected Promise."""
    pass


class ProgressFilter(_Filter):
    """Transforms a progress notification."""
    pass


DoneFilter.NO_OP = DoneFilter()
FailFilter.NO_OP = FailFilter()
ProgressFilter.NO_OP = ProgressFilter()


class _Pipe(object):

    def __init__(self, func=None):
        if func is not None and not callable(func):
            raise TypeError('%s requires a callable, not %r'
                            % (type(self).__name__, func))
        self._func = func

    def pipe(self, value):
        """Returns the Promise who will settle the chained Promise."""
        if self._func is None:
            raise NotImplementedError()
        return self._func(value)

    @property
    def name(self):
        return getattr(self._func, '__name__', type(self).__name__)

    @classmethod
    def wrap(cls, value):
        """Convert a callable into a pipe of this class. None stays None."""
        if value is None or isinstance(value, cls):
            return value
        return cls(value)


class DonePipe(_Pipe):
    """Chains a Promise to the result of a resolved Promise."""
    pass


class FailPipe(_Pipe):
    """Chains a Promise to the reason of a rejected Promise."""
    pass


class ProgressPipe(_Pipe):
    """Chains a Promise to a progress notification."""
    pass


def is_filter(value):
    return isinstance(value, _Filter)


def is_pipe(value):
    return isinstance(value, _Pipe)


def check_slots(expected_types, values):
    """Ensure each value is either None or an instance of the expected type.

    Args:
        expected_types (tuple of type): types for the done, fail and progress
            positions.
        values (tuple): values given at these positions.
    Raises:
        TypeError: if a value has not the expected type.
    """
    for expected_type, value in zip(expected_types, values):
        if value is not None and not isinstance(value, expected_type):
            raise TypeError('Expected %s or None, got %r'
                            % (expected_type.__name__, value))
