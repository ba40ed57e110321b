from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: int = Field(ge=0)  # times the keyword appears in doc_id
