"""Serialization module: export engine results as JSON-ready dicts."""

from load_engine.serialization.report import (
    report_to_dict,
    result_to_dict,
    roster_summary_to_dict,
    to_json_string,
)

__all__ = ["report_to_dict", "result_to_dict", "roster_summary_to_dict", "to_json_string"]
