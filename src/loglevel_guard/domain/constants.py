"""Rule identity and default naming convention for the log level guard rule."""

RULE_ID = "LogLevelAnalyzer"
PYLINT_MSG_ID = "E9601"
PYLINT_SYMBOL = "unguarded-debug-log"

RULE_TITLE = "Log level not checked"
RULE_CATEGORY = "Performance"
RULE_DESCRIPTION = (
    "Debug-level logging calls build their message even when the level is disabled. "
    "Wrap them in the matching 'is enabled' check so the formatting work is skipped."
)
MESSAGE_TEMPLATE = "Check '{guard}' before logging"
PYLINT_MESSAGE_TEMPLATE = "Check '%s' before logging"

DEFAULT_LOG_CALL_PREFIX = "Debug"
DEFAULT_FORMAT_SUFFIX = "Format"
DEFAULT_INTERFACE_PREFIX = "log4net.ILog."
DEFAULT_GUARD_TEMPLATE = "Is{level}Enabled"

TOOL_SECTION = "loglevel-guard"
