# -*- coding: utf-8 -*-


class AlreadyFinalizedError(Exception):
    """A producer call has been made on a promise already resolved or rejected.

    Resolve, reject and notify are only allowed while the promise is pending.
    """
    pass


class TimeoutError(Exception):
    """An operation could not be executed within the time allowed."""
    pass


class RejectedError(Exception):
    """The promise has been rejected with a value which is not an exception.

    Attributes:
        reason: the fail value of the promise.
    """

    def __init__(self, reason):
        Exception.__init__(self, 'Promise rejected: %r' % (reason,))
        self.reason = reason
