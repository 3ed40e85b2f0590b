"""Pairing and angle ranking module."""

from vecangle.angles.pairing import pairwise, pairwise_indices
from vecangle.angles.report import format_pair, format_report, report_to_dict
from vecangle.angles.sorting import theta_sort, theta_sort_pairs

__all__ = [
    "format_pair",
    "format_report",
    "pairwise",
    "pairwise_indices",
    "report_to_dict",
    "theta_sort",
    "theta_sort_pairs",
]
