"""
Add Subscriber Tool - Subscribe an email address or wallet to the publication.
"""

from typing import Any, Optional
from pydantic import Field
import logging

from ...errors import ToolValidationError
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata

logger = logging.getLogger(__name__)


class AddSubscriberInput(ToolInput):
    """Input schema for paragraph_add_subscriber."""
    email: Optional[str] = Field(default=None, description="Subscriber email (email or wallet required)")
    wallet: Optional[str] = Field(default=None, description="Subscriber wallet address (email or wallet required)")
    send_welcome_email: bool = Field(default=True, description="Send the publication's welcome email")


class AddSubscriberTool(ToolBase):
    """
    Adds a subscriber to the publication of the API key.

    The API answers either with the subscriber record or a bare
    {"success": true}; both are passed through unchanged.
    """

    METADATA = ToolMetadata(
        name="paragraph_add_subscriber",
        description="Add a subscriber by email or wallet address",
        category="subscribers",
        tags=["subscriber", "add", "email", "wallet", "newsletter"],
    )

    class InputSchema(AddSubscriberInput):
        pass

    async def execute(self, input_data: AddSubscriberInput, context: ToolContext) -> Any:
        if not input_data.email and not input_data.wallet:
            raise ToolValidationError("At least one of email or wallet is required")

        body = {"sendWelcomeEmail": input_data.send_welcome_email}
        if input_data.email:
            body["email"] = input_data.email
        if input_data.wallet:
            body["wallet"] = input_data.wallet

        logger.info("Adding subscriber")
        return await context.client.request("POST", "/v1/subscribers", body)
