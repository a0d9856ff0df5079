from .enhancer import ContentEnhancer, enhance_text, get_default_enhancer

__all__ = ["ContentEnhancer", "enhance_text", "get_default_enhancer"]
