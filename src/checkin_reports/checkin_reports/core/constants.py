"""Constants and contractual response messages."""

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

DEFAULT_TOKEN_HOURS = 24

MSG_TOKEN_REQUIRED = "Access token required"
MSG_MANAGER_REQUIRED = "Access denied. Manager role required."
MSG_DATE_REQUIRED = "Date parameter is required (YYYY-MM-DD format)"
MSG_DATE_INVALID = "Invalid date format. Use YYYY-MM-DD"
MSG_DAILY_SUMMARY_FAILED = "Failed to generate daily summary"
