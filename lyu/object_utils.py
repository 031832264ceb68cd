from types import FunctionType, MethodType

from .proxy import TYPE_LOOKUP, Proxy


class _Missing:
    __slots__ = ()

    def __repr__(self):
        return "MISSING"


# Marker for keys and attributes that are absent
MISSING = _Missing()


def is_proxyable(value):
    return isinstance(value, Proxy) or any(
        type_test(value) for type_test in TYPE_LOOKUP
    )


def has_changed(old, new):
    """
    Whether writing new over old counts as a change. Values that can be
    proxied are compared by identity, since effects track the object
    itself. Other values are compared by equality; comparisons that
    fail or can't be turned into a bool (numpy arrays for instance)
    are treated as a change.
    """
    if old is new:
        return False
    if is_proxyable(old) or is_proxyable(new):
        return True
    try:
        return bool(old != new)
    except (TypeError, ValueError):
        return True


def lookup_class_attr(cls, name):
    """
    Finds name in the namespaces of cls and its bases without
    invoking any descriptors. Returns MISSING if absent.
    """
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    return MISSING


def _instance_has(obj, name):
    try:
        return name in vars(obj)
    except TypeError:
        # objects with only __slots__
        return False


def read_attr(obj, name, receiver):
    """
    Reads obj.name, with properties and plain methods defined on the
    class bound to receiver instead of obj. This way attribute access
    inside getters and methods passes through the receiver as well.
    """
    cls = type(obj)
    attr = lookup_class_attr(cls, name)
    if isinstance(attr, property):
        return attr.__get__(receiver, cls)
    if isinstance(attr, FunctionType) and not _instance_has(obj, name):
        return MethodType(attr, receiver)
    return getattr(obj, name)


def write_attr(obj, name, value, receiver):
    """
    Sets obj.name = value, with property setters invoked on receiver.
    """
    attr = lookup_class_attr(type(obj), name)
    if isinstance(attr, property):
        attr.__set__(receiver, value)
    else:
        setattr(obj, name, value)
