from pydantic import BaseModel, Field


class Page(BaseModel):
    title: str = Field(..., description="The title of the Wikipedia page")
    contents: str = Field(..., description="The plain-text body of the article")
