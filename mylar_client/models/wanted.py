"""
Wanted issue model

The getWanted command returns raw database rows, so field aliases use the
server's column names.
"""
from pydantic import Field

from mylar_client.models.base import MylarBaseModel


class WantedIssue(MylarBaseModel):
    """A comic book issue that has not yet been collected."""

    status: str = Field("", alias="Status")
    comic_name: str = Field("", alias="ComicName")
    issue_id: str = Field("", alias="IssueID")
    digital_date: str = Field("", alias="DigitalDate")
    issue_date: str = Field("", alias="IssueDate")
    image_url: str = Field("", alias="ImageURL")
    release_date: str = Field("", alias="ReleaseDate")
    issue_number_text: str = Field("", alias="Issue_Number", description="Issue number label")
    # Sort key computed by the server (e.g. '2' -> 2000), kept as sent
    issue_number: int = Field(0, alias="Int_IssueNumber", strict=True, description="Server-supplied integer issue number")
    issue_name: str = Field("", alias="IssueName")
    comic_id: str = Field("", alias="ComicID")
    date_added: str = Field("", alias="DateAdded")
