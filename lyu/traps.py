from functools import wraps

from .object_utils import MISSING, has_changed
from .proxy import proxy, unwrap
from .registry import registry


def read_key_trap(method, obj_cls):
    fn = getattr(obj_cls, method)

    @wraps(fn)
    def trap(self, *args, **kwargs):
        target = self.__target__
        try:
            value = fn(target, *args, **kwargs)
        finally:
            # missing keys are tracked as well, so adding them triggers
            registry.track(target, args[0])
        if self.__shallow__:
            return value
        return proxy(value)

    return trap


def contains_trap(method, obj_cls):
    fn = getattr(obj_cls, method)

    @wraps(fn)
    def trap(self, key):
        target = self.__target__
        result = fn(target, key)
        registry.track(target, key)
        return result

    return trap


def write_key_trap(method, obj_cls):
    fn = getattr(obj_cls, method)
    get_fn = getattr(obj_cls, "get")

    @wraps(fn)
    def trap(self, key, *args, **kwargs):
        target = self.__target__
        args = tuple(unwrap(arg) for arg in args)
        old_value = get_fn(target, key, MISSING)
        retval = fn(target, key, *args, **kwargs)
        new_value = get_fn(target, key, MISSING)
        if has_changed(old_value, new_value):
            registry.trigger(target, key)
        if method == "setdefault" and not self.__shallow__:
            retval = proxy(retval)
        return retval

    return trap


def write_trap(method, obj_cls):
    fn = getattr(obj_cls, method)

    @wraps(fn)
    def trap(self, *args, **kwargs):
        target = self.__target__
        args = tuple(unwrap(arg) for arg in args)
        kwargs = {key: unwrap(value) for key, value in kwargs.items()}
        old = target.copy()
        retval = fn(target, *args, **kwargs)
        changed = [
            key
            for key, value in target.items()
            if has_changed(old.get(key, MISSING), value)
        ]
        for key in changed:
            registry.trigger(target, key)
        if retval is target:
            # in-place operators return the proxy, not the target
            return self
        return retval

    return trap


def passthrough_trap(method, obj_cls):
    fn = getattr(obj_cls, method)

    @wraps(fn)
    def trap(self, *args, **kwargs):
        return fn(self.__target__, *args, **kwargs)

    return trap


trap_map = {
    "KEYREADERS": read_key_trap,
    "CONTAINS": contains_trap,
    "KEYWRITERS": write_key_trap,
    "WRITERS": write_trap,
    "PASSTHROUGH": passthrough_trap,
}


def construct_methods_traps_dict(obj_cls, traps, trap_map):
    return {
        method: trap_map[trap_type](method, obj_cls)
        for trap_type, methods in traps.items()
        for method in methods
    }
