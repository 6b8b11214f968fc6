from .normalization import Normalization
from .monthly_grouping import MonthlyGrouping, REFERENCE_TIMEZONE
from .identifiers import parse_user_id

__all__ = ["Normalization", "MonthlyGrouping", "REFERENCE_TIMEZONE", "parse_user_id"]
