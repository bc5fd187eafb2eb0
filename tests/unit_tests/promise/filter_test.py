# -*- coding: utf-8 -*-

import logging
import pytest

from pydeferred.promise import (Deferred, DoneFilter, FailFilter,
                                ProgressFilter, Promise, filtered)


class TestFilteredPromise(object):

    def test_filter_chain(self):
        df = Deferred()
        results = []
        downstream = df.promise.then(DoneFilter(lambda v: v * 10))
        downstream.done(results.append)

        df.resolve(3)
        assert results == [30]

    def test_fail_filter(self):
        df = Deferred()
        downstream = df.promise.filter(
            fail_filter=lambda reason: 'wrapped: %s' % reason)
        df.reject('bad')
        assert downstream.is_rejected()
        assert downstream.exception() == 'wrapped: bad'

    def test_progress_filter(self):
        df = Deferred()
        values = []
        downstream = df.promise.filter(
            progress_filter=lambda ratio: int(ratio * 100))
        downstream.progress(values.append)

        df.notify(0.25)
        df.notify(0.5)
        assert values == [25, 50]
        assert downstream.is_pending()

    def test_missing_filters_transmit_values(self):
        df = Deferred()
        values = []
        downstream = filtered(df.promise, lambda v: v + 1)
        downstream.progress(values.append)

        df.notify('step')
        df.resolve(1)
        assert values == ['step']
        assert downstream.result(0) == 2

        df2 = Deferred()
        downstream2 = filtered(df2, lambda v: v + 1)
        df2.reject('bad')
        assert downstream2.exception(0) == 'bad'

    def test_filter_on_settled_promise(self):
        """The new Promise is settled before the constructor returns."""
        downstream = Promise.resolve(4).filter(lambda v: v * v)
        assert downstream.is_resolved()
        assert downstream.result(0) == 16

        downstream = Promise.reject('bad').filter(
            fail_filter=lambda r: r.upper())
        assert downstream.is_rejected()
        assert downstream.exception(0) == 'BAD'

    def test_filters_chain(self):
        df = Deferred()
        p = df.promise.filter(lambda v: v + 1) \
            .filter(lambda v: v * 2) \
            .filter(str)
        df.resolve(4)
        assert p.result(0) == '10'

    def test_filter_raising_error_leaves_promise_pending(self, caplog):
        df = Deferred()

        def failing_filter(value):
            raise ValueError('filter error')

        downstream = df.promise.filter(failing_filter)
        with caplog.at_level(logging.ERROR):
            df.resolve(1)

        assert df.promise.is_resolved()
        assert downstream.is_pending()
        assert 'done callback' in caplog.text

    def test_filter_raising_error_on_settled_promise(self):
        def failing_filter(value):
            raise ValueError('filter error')

        with pytest.raises(ValueError):
            Promise.resolve(1).filter(failing_filter)

    def test_filter_subclass(self):
        class Doubler(DoneFilter):
            def filter(self, value):
                return value * 2

        p = Promise.resolve(21).then(Doubler())
        assert p.result(0) == 42

    def test_all_filters(self):
        df = Deferred()
        progress = []
        p = df.promise.then(DoneFilter(str), FailFilter(repr),
                            ProgressFilter(lambda v: -v))
        p.progress(progress.append)
        df.notify(1)
        df.reject(ValueError('x'))
        assert progress == [-1]
        assert p.exception(0) == "ValueError('x')"


class TestFilterWrappers(object):

    def test_no_op_filters(self):
        value = object()
        assert DoneFilter.NO_OP.filter(value) is value
        assert FailFilter.NO_OP.filter(value) is value
        assert ProgressFilter.NO_OP.filter(value) is value

    def test_wrap(self):
        def f(v):
            return v

        assert DoneFilter.wrap(None) is DoneFilter.NO_OP
        wrapper = DoneFilter(f)
        assert DoneFilter.wrap(wrapper) is wrapper
        assert isinstance(DoneFilter.wrap(f), DoneFilter)
        assert DoneFilter.wrap(f).name == 'f'

    def test_filter_requires_callable(self):
        with pytest.raises(TypeError):
            DoneFilter(42)
        with pytest.raises(TypeError):
            DoneFilter.wrap(FailFilter(str))
