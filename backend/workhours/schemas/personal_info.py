from typing import Any

from pydantic import BaseModel, field_validator

from workhours.core.validation import clean_text


class PersonalInfoBase(BaseModel):
    name: str = ""
    email: str = ""


class PersonalInfoRead(PersonalInfoBase):
    pass


class PersonalInfoUpsert(PersonalInfoBase):
    @field_validator("name", "email", mode="before")
    @classmethod
    def _clean(cls, v: Any):
        return clean_text(v)
