from .union_recovery import recover_unions

__all__ = ["recover_unions"]
