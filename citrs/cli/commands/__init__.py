from .common import load_common_commands

__all__ = ["load_common_commands"]
