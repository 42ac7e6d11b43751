from querysense.output.base import ReportOutput
from querysense.output.console import ConsoleReportOutput, JsonReportOutput
from querysense.output.http import HttpReportOutput
from querysense.output.sqs import SqsReportOutput

__all__ = [
    "ReportOutput",
    "ConsoleReportOutput",
    "HttpReportOutput",
    "JsonReportOutput",
    "SqsReportOutput",
]
