"""
Codec configuration for PictoBase.
"""

from dataclasses import dataclass


@dataclass
class CodecConfig:
    """
    Settings for stream encoding and decoding.

    The one-shot ``encode``/``decode`` functions take no configuration;
    these only affect the stream wrappers and the command line tool.
    """

    chunk_size: int = 64 * 1024
    wrap: int = 0
    verbose: bool = False

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.wrap < 0:
            raise ValueError(f"wrap must be zero or positive, got {self.wrap}")

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
