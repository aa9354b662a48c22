from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BRANCH = 'master'


class RepoHost(str, Enum):
    GITHUB = 'github.com'
    GITLAB = 'gitlab.com'


class RepoDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_url: str
    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)
    host: RepoHost
    branch: str = Field(default=DEFAULT_BRANCH, min_length=1)
