from .deepseek import DeepSeekProvider

__all__ = ["DeepSeekProvider"]
