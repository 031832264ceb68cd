from enum import Enum

from .object_utils import MISSING, has_changed, read_attr, write_attr
from .proxy import TYPE_LOOKUP, Proxy, proxy, unwrap
from .ref import Ref
from .registry import registry


def is_dunder(name):
    return name.startswith("__") and name.endswith("__")


class ObjectProxyBase(Proxy):
    __slots__ = ()

    def __getattribute__(self, name):
        if name in Proxy.__slots__:
            return super().__getattribute__(name)

        target = self.__target__
        if is_dunder(name):
            # includes __class__, so isinstance checks see the target's type
            return getattr(target, name)

        try:
            value = read_attr(target, name, self)
        finally:
            # missing attributes are tracked as well, so adding them triggers
            registry.track(target, name)
        if self.__shallow__:
            return value
        return proxy(value)

    def __setattr__(self, name, value):
        if name in Proxy.__slots__:
            return super().__setattr__(name, value)

        target = self.__target__
        value = unwrap(value)
        old_value = getattr(target, name, MISSING)
        write_attr(target, name, value, self)
        if not is_dunder(name) and has_changed(old_value, value):
            registry.trigger(target, name)

    def __delattr__(self, name):
        if name in Proxy.__slots__:
            return super().__delattr__(name)

        delattr(self.__target__, name)


def passthrough(method, reflectable=False):
    def trap(self, *args, **kwargs):
        fn = getattr(self.__target__, method, None)
        if fn is None:
            if reflectable:
                # let python try the reflected operation
                return NotImplemented
            # we don't cache this
            # since it is possible a class is dynamically modified later
            # invalidating the cached result...
            raise TypeError(f"object of type '{type(self)}' has no {method}")
        return fn(*args, **kwargs)

    return trap


# special methods are looked up on the type, bypassing __getattribute__
magic_methods = [
    "__repr__",
    "__str__",
    "__format__",
    "__bytes__",
    "__int__",
    "__float__",
    "__complex__",
    "__index__",
    "__round__",
    "__trunc__",
    "__floor__",
    "__ceil__",
    "__abs__",
    "__neg__",
    "__pos__",
    "__invert__",
    "__len__",
    "__length_hint__",
    "__iter__",
    "__reversed__",
    "__next__",
    "__contains__",
    "__getitem__",
    "__setitem__",
    "__delitem__",
    "__call__",
    "__enter__",
    "__exit__",
    "__aenter__",
    "__aexit__",
    "__aiter__",
    "__anext__",
    "__await__",
]

# binary operators return NotImplemented when the target lacks them
operator_methods = [
    "__eq__",
    "__ne__",
    "__lt__",
    "__le__",
    "__gt__",
    "__ge__",
    "__add__",
    "__sub__",
    "__mul__",
    "__matmul__",
    "__truediv__",
    "__floordiv__",
    "__mod__",
    "__divmod__",
    "__pow__",
    "__lshift__",
    "__rshift__",
    "__and__",
    "__xor__",
    "__or__",
    "__radd__",
    "__rsub__",
    "__rmul__",
    "__rmatmul__",
    "__rtruediv__",
    "__rfloordiv__",
    "__rmod__",
    "__rdivmod__",
    "__rpow__",
    "__rlshift__",
    "__rrshift__",
    "__rand__",
    "__rxor__",
    "__ror__",
    "__iadd__",
    "__isub__",
    "__imul__",
    "__imatmul__",
    "__itruediv__",
    "__ifloordiv__",
    "__imod__",
    "__ipow__",
    "__ilshift__",
    "__irshift__",
    "__iand__",
    "__ixor__",
    "__ior__",
]


ObjectProxy = type(
    "ObjectProxy",
    (ObjectProxyBase,),
    {
        "__slots__": (),
        "__bool__": lambda self: bool(self.__target__),
        "__hash__": lambda self: hash(self.__target__),
        **{method: passthrough(method) for method in magic_methods},
        **{method: passthrough(method, True) for method in operator_methods},
    },
)


def type_test(target):
    # exclude builtin objects
    # exclude objects for which we have better proxies available
    # exclude refs, they are reactive already
    # exclude enum members, they are compared by identity
    return not isinstance(target, (list, set, dict, tuple, Ref, Enum)) and (
        type(target).__module__ != object.__module__
    )


TYPE_LOOKUP[type_test] = ObjectProxy
