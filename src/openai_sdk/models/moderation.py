"""Moderation models"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ModerationRequest(BaseModel):
    """Body of a moderation request"""

    input: List[str]
    model: Optional[str] = None


class ModerationCategories(BaseModel):
    """Per-category flags"""

    model_config = ConfigDict(populate_by_name=True)

    hate: bool
    hate_threatening: bool = Field(..., alias="hate/threatening")
    self_harm: bool = Field(..., alias="self-harm")
    sexual: bool
    sexual_minors: bool = Field(..., alias="sexual/minors")
    violence: bool
    violence_graphic: bool = Field(..., alias="violence/graphic")


class ModerationCategoryScores(BaseModel):
    """Per-category scores"""

    model_config = ConfigDict(populate_by_name=True)

    hate: float
    hate_threatening: float = Field(..., alias="hate/threatening")
    self_harm: float = Field(..., alias="self-harm")
    sexual: float
    sexual_minors: float = Field(..., alias="sexual/minors")
    violence: float
    violence_graphic: float = Field(..., alias="violence/graphic")


class ModerationResult(BaseModel):
    """Moderation verdict for one input"""

    flagged: bool
    categories: ModerationCategories
    category_scores: ModerationCategoryScores


class ModerationResponse(BaseModel):
    """Moderation response"""

    id: str
    model: str
    results: List[ModerationResult] = Field(..., min_length=1)
