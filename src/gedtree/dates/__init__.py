from .normalizer import MONTHS, parse_date

__all__ = ["MONTHS", "parse_date"]
