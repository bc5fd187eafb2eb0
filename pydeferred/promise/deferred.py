# -*- coding: utf-8 -*-

from .promise import Promise


class Deferred(object):
    """The "producer" side of an async task.

    A Deferred is the "creator" side of an async task, whereas a Promise
    represents the asynchronous value from the "consumer" side. The code
    doing the work keeps the Deferred, and gives only the Promise to the
    observers, who can't settle it.

    For convenience, the observer methods are also available on the Deferred
    and are delegated to the promise.

    Example:

        >>> df = Deferred()
        >>> _ = df.done(lambda value: print('Done: %s' % value))
        >>> _ = df.resolve(7)
        Done: 7
        >>> df.promise.result()
        7

    Attributes:
        promise (Promise): the Promise associated to the Deferred.
    """

    def __init__(self, _name=None, _previous=None):
        self.promise = Promise(self._executor, _name=_name or 'Deferred',
                               _previous=_previous)

    def _executor(self, resolve, reject, notify):
        self._resolve = resolve
        self._reject = reject
        self._notify = notify

    def resolve(self, result):
        """Resolve the promise, then call the done and always callbacks.

        Errors raised by the callbacks are logged, and don't prevent the
        other callbacks to be executed.

        Args:
            result: value of the promise.
        Returns:
            Deferred: self
        Raises:
            AlreadyFinalizedError: if the promise is not pending.
        """
        self._resolve(result)
        return self

    def reject(self, reason):
        """Reject the promise, then call the fail and always callbacks.

        Args:
            reason: cause of the failure. Usually an exception, but any value
                is accepted.
        Returns:
            Deferred: self
        Raises:
            AlreadyFinalizedError: if the promise is not pending.
        """
        self._reject(reason)
        return self

    def notify(self, progress):
        """Send a progress notification to the progress callbacks.

        Returns:
            Deferred: self
        Raises:
            AlreadyFinalizedError: if the promise is not pending.
        """
        self._notify(progress)
        return self

    def done(self, callback):
        self.promise.done(callback)
        return self

    def fail(self, callback):
        self.promise.fail(callback)
        return self

    def progress(self, callback):
        self.promise.progress(callback)
        return self

    def always(self, callback):
        self.promise.always(callback)
        return self

    def then(self, done=None, fail=None, progress=None):
        result = self.promise.then(done, fail, progress)
        if result is self.promise:
            return self
        return result

    def filter(self, done_filter=None, fail_filter=None,
               progress_filter=None):
        return self.promise.filter(done_filter, fail_filter, progress_filter)

    def pipe(self, done_pipe=None, fail_pipe=None, progress_pipe=None):
        return self.promise.pipe(done_pipe, fail_pipe, progress_pipe)

    def state(self):
        return self.promise.state()

    def is_pending(self):
        return self.promise.is_pending()

    def is_resolved(self):
        return self.promise.is_resolved()

    def is_rejected(self):
        return self.promise.is_rejected()

    def wait(self, timeout=None):
        return self.promise.wait(timeout)

    def result(self, timeout=None):
        return self.promise.result(timeout)

    def exception(self, timeout=None):
        return self.promise.exception(timeout)

    def __repr__(self):
        return 'Deferred(%s)' % self.promise._inner_print()
