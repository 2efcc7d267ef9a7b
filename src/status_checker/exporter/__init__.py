from status_checker.exporter.json_exporter import (
    JsonReportExporter,
    record_to_dict,
    report_to_dict,
)

__all__ = ["JsonReportExporter", "record_to_dict", "report_to_dict"]
