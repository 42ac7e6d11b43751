class QuerySenseError(Exception):
    pass


class InvalidInput(QuerySenseError, ValueError):
    pass


class DuplicateRuleError(QuerySenseError):
    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Rule already registered: {rule_id}")
        self.rule_id = rule_id


class ConfigError(QuerySenseError):
    pass


class ReportDeliveryError(QuerySenseError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
