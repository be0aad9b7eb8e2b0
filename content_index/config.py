# content_index/config.py

import json
import os
from typing import Any, Literal, Optional

import anyio
import yaml
from pydantic import BaseModel, ConfigDict, Field


CollisionPolicy = Literal["warn", "error"]
LayoutPrecedence = Literal["metadata", "directory"]


class ContentConfig(BaseModel):
    root: str = "./content"
    extensions: list[str] = Field(default_factory=lambda: [".md", ".mdx"])
    ignore: list[str] = Field(default_factory=list)       # fnmatch patterns; dotfiles always skipped
    index_names: list[str] = Field(default_factory=lambda: ["index"])
    directory_meta_file: str = "_directory.yaml"
    max_workers: int = 16
    collision_policy: CollisionPolicy = "warn"


class LayoutsConfig(BaseModel):
    """How a page's layout is chosen."""
    precedence: LayoutPrecedence = "metadata"
    # When set, a metadata ``layout`` only wins inside these top-level directories
    metadata_directories: Optional[list[str]] = None


class Config(BaseModel):
    content: ContentConfig = Field(default_factory=ContentConfig)
    layouts: LayoutsConfig = Field(default_factory=LayoutsConfig)
    site_config_path: str = "site.config.json"

    @property
    def content_root(self) -> str:
        return self.content.root


# Site configuration (site.config.json), consumed read-only

class ProfileConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")


class SiteInfoConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None


class FeaturesConfig(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    docs_sidebar: bool = Field(default=True, alias="docsSidebar")


class SiteConfig(BaseModel):
    """Site-level settings: directory titles, author fallbacks, feature toggles."""

    model_config = ConfigDict(extra="allow")

    site: SiteInfoConfig = Field(default_factory=SiteInfoConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    directories: dict[str, str] = Field(default_factory=dict)   # name -> display title


def _get_env_value(name: str) -> Optional[str]:
    """Get environment variable value, treating empty as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_env_int(name: str) -> Optional[int]:
    value = _get_env_value(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


def _apply_env_overrides(config: Config) -> Config:
    content_root = _get_env_value("CONTENT_ROOT")
    if content_root is not None:
        config.content.root = content_root

    site_config_path = _get_env_value("SITE_CONFIG_PATH")
    if site_config_path is not None:
        config.site_config_path = site_config_path

    max_workers = _get_env_int("CONTENT_MAX_WORKERS")
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("CONTENT_MAX_WORKERS must be at least 1")
        config.content.max_workers = max_workers

    collision_policy = _get_env_value("CONTENT_COLLISION_POLICY")
    if collision_policy is not None:
        if collision_policy not in ("warn", "error"):
            raise ValueError("CONTENT_COLLISION_POLICY must be 'warn' or 'error'")
        config.content.collision_policy = collision_policy

    return config


async def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file (async)."""
    path = anyio.Path(config_path or "configs/settings.yaml")
    if await path.exists():
        text = await path.read_text()
        data = await anyio.to_thread.run_sync(yaml.safe_load, text)
        config = Config(**data) if data else Config()
        return _apply_env_overrides(config)

    return _apply_env_overrides(Config())


async def load_site_config(site_config_path: Optional[str] = None) -> SiteConfig:
    """Load the JSON site configuration; a missing file yields defaults."""
    path = anyio.Path(site_config_path or "site.config.json")
    if not await path.exists():
        return SiteConfig()

    text = await path.read_text(encoding="utf-8")
    data: Any = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Site config {site_config_path} must be a JSON object")
    return SiteConfig.model_validate(data)
