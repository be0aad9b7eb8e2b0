# content_index/models/sidebar.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SidebarNode(BaseModel):
    """
    A node in a sidebar navigation tree.

    ``url`` is None for grouping nodes that have no content item of their own.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    url: Optional[str] = None
    order: float = 0
    path: str = ""                    # Sort tie-breaker, relative to content root
    children: list["SidebarNode"] = Field(default_factory=list)
