from .csv_text import decode_csv_bytes

__all__ = ["decode_csv_bytes"]
