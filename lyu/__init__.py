import logging
from importlib.metadata import version

__version__ = version("lyu")

logging.getLogger(__name__).addHandler(logging.NullHandler())


from . import dict_proxy, object_proxy  # noqa: F401 (registers proxy types)
from .effect import ReactiveEffect, computed, effect
from .init import init
from .proxy import is_reactive, reactive, shallow_reactive, to_raw
from .ref import ComputedRef, Ref, ref
from .registry import track, trigger
