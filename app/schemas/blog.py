from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    uid: str
    first_publication_date: Optional[str] = None
    title: str = ""
    subtitle: str = ""
    author: str = ""

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PostSummary":
        data = doc.get("data") or {}
        return cls(
            uid=doc.get("uid") or "",
            first_publication_date=doc.get("first_publication_date"),
            title=data.get("title") or "",
            subtitle=data.get("subtitle") or "",
            author=data.get("author") or "",
        )


class PostPagination(BaseModel):
    next_page: Optional[str] = None
    results: List[PostSummary] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "PostPagination":
        return cls(
            next_page=response.get("next_page"),
            results=[
                PostSummary.from_document(doc) for doc in response.get("results", [])
            ],
        )


class Banner(BaseModel):
    url: str = ""


class Section(BaseModel):
    heading: str = ""
    body: List[Dict[str, Any]] = Field(default_factory=list)


class Post(BaseModel):
    id: str
    uid: str
    first_publication_date: Optional[str] = None
    last_publication_date: Optional[str] = None
    title: str = ""
    author: str = ""
    banner: Banner = Field(default_factory=Banner)
    content: List[Section] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Post":
        data = doc.get("data") or {}
        return cls(
            id=doc["id"],
            uid=doc.get("uid") or "",
            first_publication_date=doc.get("first_publication_date"),
            last_publication_date=doc.get("last_publication_date"),
            title=data.get("title") or "",
            author=data.get("author") or "",
            banner=Banner(url=(data.get("banner") or {}).get("url") or ""),
            content=[
                Section(
                    heading=section.get("heading") or "",
                    body=section.get("body") or [],
                )
                for section in data.get("content") or []
            ],
        )


class NeighborRef(BaseModel):
    uid: str
    title: str = ""

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "NeighborRef":
        data = doc.get("data") or {}
        return cls(uid=doc.get("uid") or "", title=data.get("title") or "")


class ArticleView(BaseModel):
    post: Optional[Post] = None
    reading_time: int = 0
    is_edited: bool = False
    published_label: Optional[str] = None
    edited_label: Optional[str] = None
    prev_post: Optional[NeighborRef] = None
    next_post: Optional[NeighborRef] = None
    is_fallback: bool = False
