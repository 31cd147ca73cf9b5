"""Models for the dashboard configuration"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DashboardConfig(BaseModel):
    """Settings for fetching and serving the inventory sheet"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sheet_id": "1AbCdEfGhIjKlMnOpQrStUvWxYz0123456789",
                "sheet_range": "A:Z",
                "worksheet": None,
                "include_raw_data": False,
                "cors_origins": ["*"],
                "log_level": "INFO",
            }
        }
    )

    sheet_id: Optional[str] = Field(None, description="Google Sheet key (GOOGLE_SHEET_ID)")
    service_account_json: Optional[str] = Field(
        None, description="Inline service account JSON (GOOGLE_SERVICE_ACCOUNT_JSON)"
    )
    service_account_key: Optional[str] = Field(
        None, description="Path to a service account key file (GOOGLE_SERVICE_ACCOUNT_KEY)"
    )
    sheet_range: str = Field(default="A:Z", min_length=1, description="A1 range to read")
    worksheet: Optional[str] = Field(
        None, description="Worksheet title, first worksheet when not set"
    )
    include_raw_data: bool = Field(
        default=False, description="Return the raw grid in API responses for debugging"
    )
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed origins")
    log_level: LogLevel = Field(default="INFO", description="Root log level for the CLI")

    def has_credentials(self) -> bool:
        """Whether any service account credentials are configured"""
        return bool(self.service_account_json or self.service_account_key)
