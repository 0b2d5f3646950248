from .color_wheel import ColorWheel, DEFAULT_MARGIN

__all__ = ["ColorWheel", "DEFAULT_MARGIN"]
