# -*- coding: utf-8 -*-

from .callbacks import ALWAYS, DONE, FAIL, PROGRESS, CallbackRegistry
from .composition import filtered, piped
from .decorators import wrap_promise
from .deferred import Deferred
from .errors import AlreadyFinalizedError, RejectedError, TimeoutError
from .filters import (DoneFilter, DonePipe, FailFilter, FailPipe,
                      ProgressFilter, ProgressPipe)
from .promise import Promise
from .util import get_promise, is_promise, is_thenable

__all__ = ['ALWAYS', 'DONE', 'FAIL', 'PROGRESS', 'CallbackRegistry',
           'filtered', 'piped', 'wrap_promise', 'Deferred',
           'AlreadyFinalizedError', 'RejectedError', 'TimeoutError',
           'DoneFilter', 'DonePipe', 'FailFilter', 'FailPipe',
           'ProgressFilter', 'ProgressPipe', 'Promise', 'get_promise',
           'is_promise', 'is_thenable']
