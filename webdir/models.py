"""
Data models for the directory generator.
All models use Pydantic for validation and serialization.
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Fields that hold URLs, in the order they are checked for duplicates
URL_FIELDS = ('site', 'blog', 'feed', 'about', 'now')


class Entry(BaseModel):
    """One directory listing."""
    model_config = ConfigDict(extra='forbid', frozen=True, strict=True)

    name: str
    site: str

    # Secondary pages
    blog: Optional[str] = None
    about: Optional[str] = None
    now: Optional[str] = None
    feed: Optional[str] = None

    # Community identifier, not a URL
    hnuid: Optional[str] = None

    bio: Optional[str] = None

    @field_validator('blog', 'about', 'now', 'feed', 'hnuid', 'bio', mode='before')
    @classmethod
    def empty_as_missing(cls, value):
        """An empty optional field counts as absent."""
        if value == '':
            return None
        return value

    def urls(self) -> List[str]:
        """Present URL values in check order."""
        values = (getattr(self, field) for field in URL_FIELDS)
        return [value for value in values if value is not None]


class DirectoryConfig(BaseModel):
    """Configuration for a build."""

    # Input
    data_file: str = "pwd.yaml"

    # Output
    output_dir: str = "."
    opml_file: str = "pwd.opml"
    html_file: str = "index.html"

    # Site text and links
    title: str = "HN Personal Websites"
    readme_url: str = "README.md"
    irc_url: str = "https://web.libera.chat/#hnpwd"
    hn_profile_url: str = "https://news.ycombinator.com/user?id="

    # Debug
    debug_mode: bool = False
    debug_log_file: str = "./debug/debug.log"


class BuildResult(BaseModel):
    """Summary of a finished build."""
    entries: int = 0
    outlines: int = 0
    written: List[str] = Field(default_factory=list)
