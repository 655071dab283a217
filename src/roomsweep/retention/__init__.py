"""Recording retention evaluation."""

from roomsweep.retention.base import ExpiringAction, RetentionEvaluator
from roomsweep.retention.groups import GroupRetentionEvaluator

__all__ = ["ExpiringAction", "GroupRetentionEvaluator", "RetentionEvaluator"]
