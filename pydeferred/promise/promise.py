# -*- coding: utf-8 -*-

import logging
import weakref
from threading import Condition, RLock
from .callbacks import ALWAYS, DONE, FAIL, PROGRESS, CallbackRegistry
from .errors import AlreadyFinalizedError, RejectedError, TimeoutError
from .filters import (DoneFilter, DonePipe, FailFilter, FailPipe,
                      ProgressFilter, ProgressPipe, is_filter, is_pipe,
                      check_slots)
from .util import get_promise, is_promise

_logger = logging.getLogger(__name__)


class Promise(object):
    """It represents an operation expected to be completed in the future.

    A Promise is the "consumer" side of a deferred computation. It contains a
    value not yet known when the Promise is created, and allows to register
    callbacks who will be called as soon as the outcome is known:

    - `done` callbacks receive the value, when the Promise is resolved.
    - `fail` callbacks receive the reason, when the Promise is rejected.
    - `progress` callbacks receive each notification sent while pending.
    - `always` callbacks are called in both cases, with the state and the two
      values (the one not matching the state is None).

    A callback registered after the Promise has been resolved (or rejected)
    is called immediately, with the stored value. Progress notifications are
    not stored, so a late progress callback is never called.

    The Promise itself can't be resolved by the observers: only the holder of
    the callables given to the executor (usually a Deferred) can settle it.

    All calls to the methods are thread-safe. Callbacks are never called
    while the internal lock is held.
    """

    PENDING = 'pending'
    RESOLVED = 'resolved'
    REJECTED = 'rejected'

    def __init__(self, executor, _name=None, _previous=None):
        """Constructor of the Promise.

        Call the `executor` with the three producer callables. It means the
        executor will be fully executed before the constructor returns.
        If the executor raises an exception, it's caught and the Promise is
        rejected with this exception.

        Args:
            executor (callable): Takes 3 callable arguments:
                The first one, `resolve()`, should be called when the task is
                done and must accept the result's value as its only argument.
                The second, `reject()`, should be called when an error occurs,
                with the reason of the failure.
                The third, `notify()`, can be called any number of times
                before the two others, to report the progress of the task.
                The three of them raise `AlreadyFinalizedError` when the
                Promise is no longer pending.
            _name (str): if set, name used when converted to text.
            _previous (Promise): if set, Promise this one is chained to. Only a
                weak reference is kept, used by `repr()`.
        """
        self._state = self.PENDING
        self._result = None
        self._error = None
        self._condition = Condition()
        self._producer_lock = RLock()
        self._registry = CallbackRegistry()
        self._name = _name or getattr(executor, '__name__', '???')
        self._previous = None
        if _previous is not None:
            self._previous = weakref.ref(_previous)

        try:
            executor(self._resolve, self._reject, self._notify)
        except Exception as error:
            if not self.is_pending():
                raise
            self._reject(error)

    def _finalize(self, state, result=None, error=None):
        """Set the terminal state, then dispatch the matching callbacks.

        The state is set and the callback lists are copied under the lock.
        Callbacks registered after that are executed by the registration
        itself, so each callback is called exactly once.
        """
        with self._producer_lock:
            with self._condition:
                if self._state != self.PENDING:
                    raise AlreadyFinalizedError(
                        'Promise %s already %s, cannot be %s'
                        % (self._name, self._state, state))
                self._state = state
                self._result = result
                self._error = error
                if state == self.RESOLVED:
                    kind, value = DONE, result
                else:
                    kind, value = FAIL, error
                callbacks = self._registry.get(kind)
                always_callbacks = self._registry.get(ALWAYS)
                self._condition.notify_all()

            try:
                self._registry.dispatch(kind, callbacks, value)
            finally:
                self._registry.dispatch(ALWAYS, always_callbacks, state,
                                        result, error)

    def _resolve(self, result):
        self._finalize(self.RESOLVED, result=result)

    def _reject(self, error):
        self._finalize(self.REJECTED, error=error)

    def _notify(self, progress):
        with self._producer_lock:
            with self._condition:
                if self._state != self.PENDING:
                    raise AlreadyFinalizedError(
                        'Promise %s already %s, cannot notify progress'
                        % (self._name, self._state))
                callbacks = self._registry.get(PROGRESS)
            for callback in callbacks:
                # A progress callback may settle the promise.
                if not self.is_pending():
                    break
                self._registry.dispatch(PROGRESS, [callback], progress)

    def state(self):
        """Returns the current state: PENDING, RESOLVED or REJECTED."""
        with self._condition:
            return self._state

    def is_pending(self):
        return self.state() == self.PENDING

    def is_resolved(self):
        return self.state() == self.RESOLVED

    def is_rejected(self):
        return self.state() == self.REJECTED

    def done(self, callback):
        """Add a callback called when the Promise is resolved.

        If the Promise is already resolved, the callback is called right now,
        in the calling thread. In this case, an exception raised by the
        callback is propagated to the caller.

        Args:
            callback (callable): receives the result as only argument.
        Returns:
            Promise: self
        """
        with self._condition:
            self._registry.add(DONE, callback)
            execute_now = self._state == self.RESOLVED
            result = self._result

        if execute_now:
            callback(result)
        return self

    def fail(self, callback):
        """Add a callback called when the Promise is rejected.

        If the Promise is already rejected, the callback is called right now,
        in the calling thread.

        Args:
            callback (callable): receives the reason as only argument.
        Returns:
            Promise: self
        """
        with self._condition:
            self._registry.add(FAIL, callback)
            execute_now = self._state == self.REJECTED
            error = self._error

        if execute_now:
            callback(error)
        return self

    def progress(self, callback):
        """Add a callback called at each progress notification.

        Only the notifications sent after this call are received.

        Args:
            callback (callable): receives the progress value.
        Returns:
            Promise: self
        """
        with self._condition:
            self._registry.add(PROGRESS, callback)
        return self

    def always(self, callback):
        """Add a callback called when the Promise is resolved or rejected.

        If the Promise is already settled, the callback is called right now,
        in the calling thread.

        Args:
            callback (callable): receives 3 arguments: the state (RESOLVED or
                REJECTED), the result and the reason. The one not matching the
                state is None.
        Returns:
            Promise: self
        """
        with self._condition:
            self._registry.add(ALWAYS, callback)
            state = self._state
            result, error = self._result, self._error

        if state != self.PENDING:
            callback(state, result, error)
        return self

    def then(self, done=None, fail=None, progress=None):
        """Register callbacks, or chain a new Promise to this one.

        The behavior depends of the type of the arguments:

        - plain callables are registered as done, fail and progress
          callbacks. The Promise itself is returned.
        - `DoneFilter`, `FailFilter` and `ProgressFilter` instances create a
          new Promise, settled with the filtered values (see `filter()`).
        - `DonePipe`, `FailPipe` and `ProgressPipe` instances create a new
          Promise, settled by the promises returned by the pipes (see
          `pipe()`).

        Args:
            done (callable|DoneFilter|DonePipe, optional)
            fail (callable|FailFilter|FailPipe, optional)
            progress (callable|ProgressFilter|ProgressPipe, optional)
        Returns:
            Promise: self, or the new chained Promise.
        Raises:
            TypeError: if filters and pipes are mixed, or given at the wrong
                position.
        """
        slots = (done, fail, progress)
        if any(is_filter(f) for f in slots):
            check_slots((DoneFilter, FailFilter, ProgressFilter), slots)
            return self.filter(done, fail, progress)
        if any(is_pipe(f) for f in slots):
            check_slots((DonePipe, FailPipe, ProgressPipe), slots)
            return self.pipe(done, fail, progress)

        if done is not None:
            self.done(done)
        if fail is not None:
            self.fail(fail)
        if progress is not None:
            self.progress(progress)
        return self

    def filter(self, done_filter=None, fail_filter=None,
               progress_filter=None):
        """Create a new Promise whose values are transformed by functions.

        Each filter receives a value of this Promise and returns the value
        sent to the new Promise. A missing filter transmits the value as is.

        Returns:
            Promise: new Promise depending of self.
        """
        from .composition import filtered
        return filtered(self, done_filter, fail_filter, progress_filter)

    def pipe(self, done_pipe=None, fail_pipe=None, progress_pipe=None):
        """Create a new Promise settled by the promises returned by functions.

        Each pipe receives a value of this Promise and returns another
        Promise; the outcome of this other Promise is transmitted to the new
        Promise. A missing pipe transmits the value as is.

        Returns:
            Promise: new Promise depending of self.
        """
        from .composition import piped
        return piped(self, done_pipe, fail_pipe, progress_pipe)

    def wait(self, timeout=None):
        """Wait for the Promise to be resolved or rejected.

        Args:
            timeout (float, optional): maximum time to wait, in seconds. By
                default, it can wait indefinitely.
        Returns:
            boolean: True if the Promise is settled; False if the timeout
                expired before.
        """
        with self._condition:
            return self._condition.wait_for(
                lambda: self._state != self.PENDING, timeout)

    def result(self, timeout=None):
        """Wait for the result and returns it as soon as it's available.

        Args:
            timeout (float, optional): if set, maximum time to wait the
                promise to be resolved. By default, it can wait indefinitely.
        Returns:
            *: value encapsulated, defined by the operation.
        Raises:
            TimeoutError: if the promise is not settled within the delay.
            RejectedError: if the promise is rejected with a reason who is
                not an exception.
            *: If the promise is rejected with an exception, it's raised.
        """
        if not self.wait(timeout):
            raise TimeoutError()

        with self._condition:
            if self._state == self.REJECTED:
                error = self._error
            else:
                return self._result

        if isinstance(error, BaseException):
            raise error
        raise RejectedError(error)

    def exception(self, timeout=None):
        """Wait for the promise rejection and returns its reason.

        Args:
            timeout (float, optional): if set, maximum time to wait the
                promise to be settled. By default, it can wait indefinitely.
        Returns:
            *: the reason of the rejection of the Promise.
            None: if the promise is resolved.
        Raises:
            TimeoutError: if the promise is not settled within the delay.
        """
        if not self.wait(timeout):
            raise TimeoutError()

        with self._condition:
            return self._error

    def safeguard(self):
        """Log the rejection of this Promise with the most details possible.

        Without fail callback, a rejection is silently ignored. Calling
        `safeguard()` after all chains are set will log these errors as ERROR.

        Returns:
            Promise: self
        """
        def guard(error):
            if isinstance(error, BaseException):
                _logger.error('[SAFEGUARD] %s' % self,
                              exc_info=(type(error), error,
                                        error.__traceback__))
            else:
                _logger.error('[SAFEGUARD] %s rejected: %r' % (self, error))

        return self.fail(guard)

    def __repr__(self):
        return 'Promise(%s)' % self._inner_print()

    def _inner_print(self):
        with self._condition:
            if self._state == self.REJECTED:
                state = 'F'
            elif self._state == self.RESOLVED:
                state = 'D'
            else:
                state = 'P'

        previous = self._previous() if self._previous else None
        if previous is not None:
            return '%s -> %s %s' % (previous._inner_print(), self._name, state)
        return '%s %s' % (self._name, state)

    @classmethod
    def resolve(cls, value):
        """Create a promise who resolves the selected value.

        Args:
            value: result of the promise. If it's a promise (or a Deferred),
                its promise is returned as is.
        Returns:
            Promise: new Promise already resolved, containing the value
                passed in parameter.
        """
        if is_promise(value):
            return get_promise(value)
        return cls(lambda resolve, reject, notify: resolve(value),
                   _name='RESOLVE')

    @classmethod
    def reject(cls, reason):
        """Create a Promise rejected for the reason specified.

        Args:
            reason: reason of the rejection.
        Returns:
            Promise: new Promise already rejected.
        """
        return cls(lambda resolve, reject, notify: reject(reason),
                   _name='REJECT')
