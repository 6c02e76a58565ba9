"""
History log model
"""
from pydantic import Field

from mylar_client.models.base import MylarBaseModel


class History(MylarBaseModel):
    """An entry in Mylar's download and post-processing history."""

    status: str = Field("", alias="Status")
    comic_name: str = Field("", alias="ComicName")
    issue_id: str = Field("", alias="IssueID")
    checksum: str = Field("", alias="crc", description="File checksum; empty for snatch entries")
    issue_number: str = Field("", alias="Issue_Number")
    comic_id: str = Field("", alias="ComicID")
    provider: str = Field("", alias="Provider", description="Search provider; empty when unknown")
    date_added: str = Field("", alias="DateAdded")
