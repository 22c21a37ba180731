from .errors import UNDEFINED, throw_if_null, throw_if_undefined

__all__ = ["UNDEFINED", "throw_if_null", "throw_if_undefined"]
