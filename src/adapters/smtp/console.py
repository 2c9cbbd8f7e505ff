"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notifier port, logging verification codes for debug deployments.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - the log line is the delivery channel.
    """

    async def send_verification_code(self, name: str, email: str, code: str) -> None:
        """
        Log verification code to console (simulates email delivery).

        The code is logged at INFO level to be visible in container logs.

        Args:
            name: Recipient display name
            email: Recipient email address (normalized by domain layer)
            code: 6-digit verification code
        """
        logger.info("[VERIFICATION] Name: %s Email: %s Code: %s", name, email, code)
