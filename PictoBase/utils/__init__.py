from PictoBase.utils.logging import get_logger, PictoBaseLogger

__all__ = [
    "get_logger",
    "PictoBaseLogger",
]
