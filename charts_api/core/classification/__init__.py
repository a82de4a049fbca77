from .record_classifier import classify

__all__ = ["classify"]
