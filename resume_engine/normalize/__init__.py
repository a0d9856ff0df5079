from .normalize_text import canonicalize_header, normalize_text

__all__ = ["canonicalize_header", "normalize_text"]
