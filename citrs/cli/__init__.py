from .shell import Shell, run

__all__ = ["Shell", "run"]
