# -*- coding: utf-8 -*-

import logging
from ..common import config

_logger = logging.getLogger(__name__)

DONE = 'done'
FAIL = 'fail'
PROGRESS = 'progress'
ALWAYS = 'always'

KINDS = (DONE, FAIL, PROGRESS, ALWAYS)


class CallbackRegistry(object):
    """Ordered lists of callbacks, one list per kind of event.

    It's a variation of the Observer pattern: each promise owns a registry,
    and observers "connect" their callables to one of the four kinds of
    events (done, fail, progress and always).
    Callbacks are kept in insertion order, and are never de-duplicated: a
    callable added twice will be called twice.

    The registry is not thread-safe by itself: the Promise owning it guards
    all accesses with its own lock.
    """

    def __init__(self):
        self._callbacks = dict((kind, []) for kind in KINDS)

    def add(self, kind, callback):
        """Register a callback for a kind of event.

        Args:
            kind (str): one of DONE, FAIL, PROGRESS or ALWAYS.
            callback (callable): callback to append.
        Raises:
            ValueError: if the kind is unknown.
            TypeError: if the callback is not callable.
        """
        if kind not in self._callbacks:
            raise ValueError('Unknown callback kind: %r' % (kind,))
        if not callable(callback):
            raise TypeError('%s callback must be callable, not %r'
                            % (kind, callback))
        self._callbacks[kind].append(callback)

    def get(self, kind):
        """Returns a copy of the list of callbacks of this kind.

        The copy is not affected by callbacks registered later.
        """
        return list(self._callbacks[kind])

    def count(self, kind):
        return len(self._callbacks[kind])

    def __len__(self):
        return sum(len(callbacks) for callbacks in self._callbacks.values())

    @staticmethod
    def dispatch(kind, callbacks, *args):
        """Call each callback in order, with the same arguments.

        An exception raised by a callback is logged and ignored; the next
        callbacks are executed anyway.

        Args:
            kind (str): kind of the callbacks, used in the log message.
            callbacks (list of callable): snapshot obtained by ``get()``.
            *args: arguments passed to each callback.
        """
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                _logger.error('Promise %s callback %r raised an exception!',
                              kind, callback,
                              exc_info=config.get('log_callback_traceback'))
