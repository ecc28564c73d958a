from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None


class Article(BaseModel):
    # Wire names are camelCase; attributes are snake_case
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: Source = Field(default_factory=Source)
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[str] = Field(default=None, alias="publishedAt")
    content: Optional[str] = None


class NewsApiResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    total_results: Optional[int] = Field(default=None, alias="totalResults")
    articles: List[Article] = Field(default_factory=list)
    code: Optional[str] = None  # only on error bodies
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
