"""
Report construction: selection policies and the incremental report builder.
"""

from status_checker.report.builder import ReportBuilder, build_report
from status_checker.report.policies import (
    AllRecordsPolicy,
    InterestingCodesPolicy,
    Status200And403Policy,
    get_policy,
)

__all__ = [
    "AllRecordsPolicy",
    "InterestingCodesPolicy",
    "ReportBuilder",
    "Status200And403Policy",
    "build_report",
    "get_policy",
]
