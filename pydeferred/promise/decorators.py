# -*- coding: utf-8 -*-

from .promise import Promise


def wrap_promise(f):
    """Decorator who converts the result in a Promise object.

    If the function decorated returns a Promise (or a Deferred), its Promise
    is transmitted as is. Else, a new Promise is created, resolved with the
    returned value. If the function raises an exception, the Promise is
    rejected with it.
    """
    def wrapper(*args, **kwargs):
        try:
            return Promise.resolve(f(*args, **kwargs))
        except Exception as error:
            return Promise.reject(error)

    return wrapper
