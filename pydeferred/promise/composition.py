# -*- coding: utf-8 -*-

"""Operators building a new Promise from an existing one.

Both operators create a fresh Deferred, then register internal callbacks on
the upstream Promise to drive it. As a callback registered on a settled
Promise is executed immediately, chaining to a Promise already resolved (or
rejected) settles the new Promise before the operator returns.

If a filter or a pipe raises an exception, the new Promise stays pending.
The error is logged by the upstream dispatch if the upstream is settled
later, or propagated to the caller if the upstream was already settled.
"""

import logging
from .deferred import Deferred
from .filters import (DoneFilter, DonePipe, FailFilter, FailPipe,
                      ProgressFilter, ProgressPipe)
from .util import get_promise, is_promise

_logger = logging.getLogger(__name__)


def _chain_name(operator, functions):
    names = [getattr(f, 'name', None) or getattr(f, '__name__', '???')
             for f in functions if f is not None]
    return '%s(%s)' % (operator, ', '.join(names))


def filtered(upstream, done_filter=None, fail_filter=None,
             progress_filter=None):
    """Create a Promise whose values are the upstream values transformed.

    Args:
        upstream (Promise|Deferred): Promise to chain to.
        done_filter (callable|DoneFilter, optional): transforms the result.
        fail_filter (callable|FailFilter, optional): transforms the reason.
        progress_filter (callable|ProgressFilter, optional): transforms each
            progress notification.
    Returns:
        Promise: the new Promise. A missing filter transmits the value as is.
    """
    upstream = get_promise(upstream)
    name = _chain_name('filter', (done_filter, fail_filter, progress_filter))
    done_filter = DoneFilter.wrap(done_filter)
    fail_filter = FailFilter.wrap(fail_filter)
    progress_filter = ProgressFilter.wrap(progress_filter)
    df = Deferred(_name=name, _previous=upstream)

    def on_done(result):
        df.resolve(done_filter.filter(result))

    def on_fail(error):
        df.reject(fail_filter.filter(error))

    def on_progress(progress):
        df.notify(progress_filter.filter(progress))

    upstream.done(on_done).fail(on_fail).progress(on_progress)
    return df.promise


def piped(upstream, done_pipe=None, fail_pipe=None, progress_pipe=None):
    """Create a Promise settled by the promises returned by the pipes.

    When the upstream Promise emits a value, the matching pipe is called with
    it and must return another Promise (the "inner" one). The result, reason
    and progress notifications of the inner Promise are then transmitted to
    the new Promise.

    Args:
        upstream (Promise|Deferred): Promise to chain to.
        done_pipe (callable|DonePipe, optional): called with the result.
        fail_pipe (callable|FailPipe, optional): called with the reason.
        progress_pipe (callable|ProgressPipe, optional): called with each
            progress notification.
    Returns:
        Promise: the new Promise. A missing pipe transmits the value as is.
    """
    upstream = get_promise(upstream)
    done_pipe = DonePipe.wrap(done_pipe)
    fail_pipe = FailPipe.wrap(fail_pipe)
    progress_pipe = ProgressPipe.wrap(progress_pipe)

    name = _chain_name('pipe', (done_pipe, fail_pipe, progress_pipe))
    df = Deferred(_name=name, _previous=upstream)

    def forward(inner, pipe):
        if not is_promise(inner):
            raise TypeError('%s must return a Promise, not %r'
                            % (pipe.name, inner))
        _logger.debug('%r piped to %r', df, inner)
        get_promise(inner).done(df.resolve) \
            .fail(df.reject) \
            .progress(df.notify)

    def on_done(result):
        if done_pipe is None:
            df.resolve(result)
        else:
            forward(done_pipe.pipe(result), done_pipe)

    def on_fail(error):
        if fail_pipe is None:
            df.reject(error)
        else:
            forward(fail_pipe.pipe(error), fail_pipe)

    def on_progress(progress):
        if progress_pipe is None:
            df.notify(progress)
        else:
            forward(progress_pipe.pipe(progress), progress_pipe)

    upstream.done(on_done).fail(on_fail).progress(on_progress)
    return df.promise
