from .normalization import to_float, to_int, to_text

__all__ = ["to_float", "to_int", "to_text"]
