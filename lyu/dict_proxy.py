from .proxy import TYPE_LOOKUP, Proxy
from .traps import construct_methods_traps_dict, trap_map

dict_traps = {
    "KEYREADERS": {
        "get",
        "__getitem__",
    },
    "CONTAINS": {
        "__contains__",
    },
    "KEYWRITERS": {
        "setdefault",
        "__setitem__",
    },
    "WRITERS": {
        "update",
        "__ior__",
    },
    # enumeration, comparison and deletion are not tracked
    "PASSTHROUGH": {
        "clear",
        "copy",
        "items",
        "keys",
        "pop",
        "popitem",
        "values",
        "__delitem__",
        "__eq__",
        "__iter__",
        "__len__",
        "__ne__",
        "__or__",
        "__repr__",
        "__reversed__",
        "__ror__",
        "__sizeof__",
        "__str__",
    },
}


class DictProxyBase(Proxy[dict]):
    pass


DictProxy = type(
    "DictProxy",
    (DictProxyBase,),
    construct_methods_traps_dict(dict, dict_traps, trap_map),
)


def type_test(target):
    return isinstance(target, dict)


TYPE_LOOKUP[type_test] = DictProxy
