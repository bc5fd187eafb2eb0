# -*- coding: utf-8 -*-

from pydeferred.promise import (Deferred, Promise, get_promise, is_promise,
                                is_thenable)


class TestPromiseUtils(object):

    def test_is_thenable(self):
        class Thenable(object):
            def then(self, on_done=None):
                pass

        class NotThenable(object):
            then = 'not a method'

        assert is_thenable(Promise.resolve(1))
        assert is_thenable(Deferred())
        assert is_thenable(Thenable())
        assert not is_thenable(3)
        assert not is_thenable(NotThenable())

    def test_is_promise(self):
        assert is_promise(Promise.resolve(1))
        assert is_promise(Deferred())
        assert not is_promise(3)

    def test_get_promise(self):
        df = Deferred()
        assert get_promise(df) is df.promise
        assert get_promise(df.promise) is df.promise
        assert get_promise(3) == 3
