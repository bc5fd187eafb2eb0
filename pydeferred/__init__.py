# -*- coding: utf-8 -*-

from .__version__ import __version__  # noqa

import logging

from .promise import (AlreadyFinalizedError, Deferred, DoneFilter, DonePipe,
                      FailFilter, FailPipe, ProgressFilter, ProgressPipe,
                      Promise, RejectedError, TimeoutError, wrap_promise)

# The library doesn't configure the logging: see ``pydeferred.common.log``.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['AlreadyFinalizedError', 'Deferred', 'DoneFilter', 'DonePipe',
           'FailFilter', 'FailPipe', 'ProgressFilter', 'ProgressPipe',
           'Promise', 'RejectedError', 'TimeoutError', 'wrap_promise']
