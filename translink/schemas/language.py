from pydantic import BaseModel, Field
from typing import List, Optional, Union


class TranslationPair(BaseModel):
    source: str = Field(..., title="Source Language", description="Code of the configured source language.")
    target: str = Field(..., title="Target Language", description="Code of one configured target language.")
    source_name: str = Field(..., description="Display name of the source language.")
    target_name: str = Field(..., description="Display name of the target language.")
    source_symbol: str = Field(..., description="Flag shown next to the source language.")
    target_symbol: str = Field(..., description="Flag shown next to the target language.")

    class Config:
        json_schema_extra = {
            "example": {
                "source": "fr",
                "target": "en",
                "source_name": "French",
                "target_name": "English",
                "source_symbol": "🇫🇷",
                "target_symbol": "🇺🇸",
            }
        }


class LanguageSettings(BaseModel):
    source_language: str = Field(..., title="Source Language")
    target_languages: List[str] = Field(default_factory=list, title="Target Languages")


class LanguageBadge(BaseModel):
    record_id: Union[int, str] = Field(..., description="Content record carrying this language.")
    code: str
    name: str
    symbol: str
    is_original: bool = Field(False, description="True when the record is the anchor of its translation set.")
    status: Optional[str] = Field(None, description="Translation status, None for originals.")


class LanguageStatistic(BaseModel):
    code: str
    name: str
    symbol: str
    count: int = 0
