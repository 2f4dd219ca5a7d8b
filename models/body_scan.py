from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeImagesRequest(BaseModel):
    """Payload sent to the body-fat image analysis endpoint."""

    images: List[str] = Field(..., description="Public URLs of the front, side and back photos.")
    age: Optional[int] = None
    height_cms: Optional[float] = Field(default=None, alias="heightCms")
    weight_kgs: Optional[float] = Field(default=None, alias="weightKgs")

    model_config = ConfigDict(populate_by_name=True)


class BodyScanAnalysis(BaseModel):
    """
    Response of the image analysis endpoint. The body fat figure arrives as
    free text, e.g. "around 18.5%".
    """

    body_fat: str = Field(..., alias="bodyFat")
    rationale: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BodyScan(BaseModel):
    """A body scan row as stored in the remote data store."""

    user_id: str
    front_image_url: Optional[str] = None
    side_image_url: Optional[str] = None
    back_image_url: Optional[str] = None
    analysis_rationale: Optional[str] = None
    analysis_body_fat: Optional[float] = None
    scanned_at: datetime
    bmi: Optional[str] = None
    tdee: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProgressEntry(BaseModel):
    body_fat: float
    timestamp: datetime
    analysis: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
