from .titler import FALLBACK_TITLE, clean_title, generate_title

__all__ = ["FALLBACK_TITLE", "clean_title", "generate_title"]
