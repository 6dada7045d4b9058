"""DayZ news feed lookups (dayz.com article API)."""
from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from chatcmd.config import Settings
from chatcmd.upstream import UpstreamClient, parse_body


class ArticleCategory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slug: str


class Article(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str
    slug: str
    category: ArticleCategory = Field(alias="ArticleCategory")


class ArticlePage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rows: List[Article] = []


class NewsClient(UpstreamClient):
    """Fetches the most recent DayZ news articles."""

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        self._url = settings.dayz_news_url
        self._rows = settings.dayz_news_rows

    async def articles(self) -> list[Article]:
        """Newest-first list of articles.

        Raises:
            UpstreamError: dayz.com could not be reached or returned garbage.
        """
        body = await self._get_json(self._url, params={"rowsPerPage": self._rows})
        return parse_body(ArticlePage, body).rows


def find_article(articles: Sequence[Article], search: Optional[str] = None) -> Optional[Article]:
    """Latest article, or the first whose title contains *search* case-insensitively."""
    if not articles:
        return None
    if not search:
        return articles[0]
    needle = search.lower()
    for article in articles:
        if needle in article.title.lower():
            return article
    return None


def article_link(article: Article, base_url: str) -> str:
    return f"{article.title} - {base_url.rstrip('/')}/{article.category.slug}/{article.slug}"
