from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptSettings(BaseModel):
    mode: str = Field(description="Mode label, e.g. 'Basic'")
    length: str = Field(description="Prompt length label, e.g. 'Ultra-detailed'")
    format: str = Field(description="Output format label, e.g. 'DALL-E'")
    categories: Dict[str, bool] = Field(description="Category label -> enabled, in declaration order")


class PromptExport(BaseModel):
    """Exported prompt snapshot."""
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    negative_prompt: Optional[str] = Field(default=None, alias="negativePrompt")
    settings: PromptSettings
    timestamp: str = Field(description="ISO-8601 UTC timestamp with milliseconds")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
