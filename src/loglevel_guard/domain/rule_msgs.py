"""Pure message-building for pylint from the rule metadata. No I/O or infrastructure imports."""

from loglevel_guard.domain.constants import (
    PYLINT_MESSAGE_TEMPLATE,
    PYLINT_MSG_ID,
    PYLINT_SYMBOL,
    RULE_DESCRIPTION,
    RULE_ID,
)


class RuleMsgBuilder:
    """Builds the pylint msgs dict and the rule listing shown by the CLI."""

    @staticmethod
    def build_msgs() -> dict[str, tuple[str, str, str]]:
        """Return { msgid: (message_template, symbol, description) } for checker.msgs."""
        return {
            PYLINT_MSG_ID: (PYLINT_MESSAGE_TEMPLATE, PYLINT_SYMBOL, RULE_DESCRIPTION),
        }

    @staticmethod
    def rule_rows() -> list[dict[str, str]]:
        """One row per rule for `loglevel-guard rules`."""
        return [
            {
                "rule_id": RULE_ID,
                "pylint_id": PYLINT_MSG_ID,
                "symbol": PYLINT_SYMBOL,
                "description": RULE_DESCRIPTION,
            }
        ]
