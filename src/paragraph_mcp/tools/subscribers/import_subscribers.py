"""
Import Subscribers Tool - Bulk import subscribers from a CSV file.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field
import logging

from ...errors import ToolValidationError
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, ToolOutput, require

logger = logging.getLogger(__name__)

UPLOAD_FILENAME = "subscribers.csv"


class ImportSubscribersInput(ToolInput):
    """Input schema for paragraph_import_subscribers."""
    csv_path: Optional[str] = Field(default=None, description="Path to a local CSV file (required)")
    send_welcome_email: bool = Field(default=True, description="Send the welcome email to imported subscribers")


class ImportSubscribersOutput(ToolOutput):
    """Output schema for paragraph_import_subscribers."""
    imported: int = Field(default=0, description="Rows imported")
    skipped: int = Field(default=0, description="Rows skipped (duplicates or invalid)")
    total: int = Field(default=0, description="Rows read from the file")


class ImportSubscribersTool(ToolBase):
    """
    Uploads a CSV of subscribers as a multipart form.

    The whole file is read into memory and posted as `file`; the transport
    chooses the multipart boundary. Authentication and error reporting are the
    same as for the JSON endpoints.
    """

    METADATA = ToolMetadata(
        name="paragraph_import_subscribers",
        description="Import subscribers from a local CSV file",
        category="subscribers",
        tags=["subscriber", "import", "csv", "bulk", "upload"],
    )

    class InputSchema(ImportSubscribersInput):
        pass

    OutputSchema = ImportSubscribersOutput

    async def execute(self, input_data: ImportSubscribersInput, context: ToolContext) -> ImportSubscribersOutput:
        require(input_data, "csv_path")

        csv_file = Path(input_data.csv_path).expanduser()
        if not csv_file.is_file():
            raise ToolValidationError(f"CSV file not found: {input_data.csv_path}")
        csv_bytes = csv_file.read_bytes()

        logger.info(f"Importing subscribers from {csv_file} ({len(csv_bytes)} bytes)")
        result = await context.client.upload(
            "/v1/subscribers/import",
            files={"file": (UPLOAD_FILENAME, csv_bytes, "text/csv")},
            params={"sendWelcomeEmail": input_data.send_welcome_email},
        )
        if not isinstance(result, dict):
            return ImportSubscribersOutput()

        return ImportSubscribersOutput(
            imported=result.get("imported") or 0,
            skipped=result.get("skipped") or 0,
            total=result.get("total") or 0,
        )
