"""
Comic series and issue models

Field aliases mirror the lower-camel names used by the getIndex and getComic
commands.
"""
from typing import List

from pydantic import Field

from mylar_client.models.base import MylarBaseModel


class Comic(MylarBaseModel):
    """A comic book series with one or more issues."""

    id: str = Field("", alias="id", description="Series ID")
    name: str = Field("", alias="name", description="Series name")
    image_url: str = Field("", alias="imageURL", description="Cover image URL")
    status: str = Field("", alias="status", description="Tracking status (e.g. 'Active')")
    publisher: str = Field("", alias="publisher", description="Publisher name")
    year: str = Field("", alias="year", description="First year of publication")
    latest_issue: str = Field("", alias="latestIssue", description="Label of the latest issue")
    total_issues: int = Field(0, alias="totalIssues", strict=True, description="Number of issues in the series")
    details_url: str = Field("", alias="detailsURL", description="External details page")


class Issue(MylarBaseModel):
    """A single issue of a comic series."""

    id: str = Field("", alias="id", description="Issue ID")
    name: str = Field("", alias="name", description="Issue title")
    image_url: str = Field("", alias="imageURL", description="Cover image URL")
    # Not numeric: the server uses labels such as '1.MU' or 'AU'
    number: str = Field("", alias="number", description="Issue number label")
    release_date: str = Field("", alias="releaseDate", description="Release date as sent by the server")
    issue_date: str = Field("", alias="issueDate", description="Cover date as sent by the server")
    status: str = Field("", alias="status", description="Collection status (e.g. 'Downloaded')")
    comic_name: str = Field("", alias="comicName", description="Parent series name")


class ComicDetail(MylarBaseModel):
    """Details of a comic series, including its issues and annuals."""

    comic: List[Comic] = Field(default_factory=list, alias="comic")
    annuals: List[Issue] = Field(default_factory=list, alias="annuals")
    issues: List[Issue] = Field(default_factory=list, alias="issues")
