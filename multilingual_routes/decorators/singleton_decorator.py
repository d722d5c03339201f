from functools import wraps


def singleton(cls):
    """
    Class decorator: every call returns the first instance of ``cls``.

    The undecorated class stays reachable as ``.cls`` for type checks.
    """
    instance = None

    @wraps(cls, updated=())
    def get_instance(*args, **kwargs):
        nonlocal instance
        if instance is None:
            instance = cls(*args, **kwargs)
        return instance

    get_instance.cls = cls
    return get_instance
