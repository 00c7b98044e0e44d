from .txt import read_fabric_txt

__all__ = [
    "read_fabric_txt",
]
