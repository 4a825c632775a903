from harbor_api.log.logger_setup import setup_logger
from harbor_api.log.sensitive import SensitiveLogFilter, sensitive_log_filter

__all__ = ["setup_logger", "SensitiveLogFilter", "sensitive_log_filter"]
