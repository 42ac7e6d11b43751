from querysense.core.analyzer import DEFAULT_DATABASE_TYPE, SqlAnalyzer, analyze
from querysense.core.pipeline import ReportPipeline

__all__ = ["DEFAULT_DATABASE_TYPE", "ReportPipeline", "SqlAnalyzer", "analyze"]
