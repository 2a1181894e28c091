from pydantic import BaseModel, field_validator


class Task(BaseModel):
    id: str = ""
    title: str = ""
    # conventionally "pending" or "completed", not enforced
    status: str = ""

    @field_validator("id", "title", "status", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # JSON null decodes to an empty string
        return "" if value is None else value
