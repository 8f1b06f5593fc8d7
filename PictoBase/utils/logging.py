import logging
import sys
from typing import Optional

class PictoBaseLogger:
    def __init__(self, name: str = "PictoBase", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        # stdout carries encoded data
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        
        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)
    
    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
    
    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
    
    def error(self, msg: str) -> None:
        self.logger.error(msg)
    
    def transfer_summary(
        self,
        mode: str,
        bytes_in: int,
        bytes_out: int,
        symbols: int,
        elapsed: float,
    ) -> None:
        rate = bytes_in / elapsed if elapsed > 0 else 0.0
        self.info(
            f"{mode} | In: {bytes_in} B | Out: {bytes_out} B | Symbols: {symbols} "
            f"| Time: {elapsed:.4f}s | Rate: {rate:.0f} B/s"
        )


_logger: Optional[PictoBaseLogger] = None

def get_logger() -> PictoBaseLogger:
    global _logger
    if _logger is None:
        _logger = PictoBaseLogger()
    return _logger
