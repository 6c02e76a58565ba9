"""
Test factories for the Mylar API client

Wire-format payloads as the server sends them, with builders for the
structured envelope.
"""
import json
from typing import Any, Dict, List, Optional

MYLAR_URL = "http://localhost:8090"
API_KEY = "testapikey"


def envelope(data: Any) -> Dict[str, Any]:
    """Wrap data in a successful envelope."""
    return {"success": True, "data": data}


def error_envelope(code: int = 100, message: str = "this is an error") -> Dict[str, Any]:
    """Build an unsuccessful envelope."""
    return {"success": False, "error": {"code": code, "message": message}}


class ComicFactory:
    """Factory for comic series payloads."""

    @staticmethod
    def after_the_incal(**kwargs) -> Dict[str, Any]:
        data = {
            "id": "79767",
            "name": "After the Incal",
            "imageURL": "https://comicvine1.cbsistatic.com/uploads/scale_large/6/67663/4361217-01.jpg",
            "status": "Active",
            "publisher": "Les Humanoïdes Associés",
            "year": "2015",
            "latestIssue": "1",
            "totalIssues": 1,
            "detailsURL": "https://comicvine.gamespot.com/after-the-incal/4050-79767/",
        }
        data.update(kwargs)
        return data

    @staticmethod
    def amazing_mary_jane(**kwargs) -> Dict[str, Any]:
        data = {
            "id": "122214",
            "name": "Amazing Mary Jane",
            "imageURL": "https://comicvine1.cbsistatic.com/uploads/scale_large/6/67663/7116848-01.jpg",
            "status": "Active",
            "publisher": "Marvel",
            "year": "2019",
            "latestIssue": "6",
            "totalIssues": 6,
            "detailsURL": "https://comicvine.gamespot.com/amazing-mary-jane/4050-122214/",
        }
        data.update(kwargs)
        return data


class IssueFactory:
    """Factory for issue payloads used by getComic."""

    @staticmethod
    def create(
        id: str = "742362",
        number: str = "6",
        status: str = "Downloaded",
        **kwargs
    ) -> Dict[str, Any]:
        data = {
            "id": id,
            "name": "None",
            "imageURL": "https://comicvine1.cbsistatic.com/uploads/scale_small/6/67663/7284327-06.jpg",
            "number": number,
            "releaseDate": "2020-03-18",
            "issueDate": "2020-05-01",
            "status": status,
            "comicName": "Amazing Mary Jane",
        }
        data.update(kwargs)
        return data


def comic_detail(annuals: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """getComic payload with one series, no annuals and two issues by default."""
    return {
        "comic": [ComicFactory.amazing_mary_jane()],
        "annuals": annuals or [],
        "issues": [
            IssueFactory.create(),
            IssueFactory.create(
                id="737748",
                number="5",
                status="Snatched",
                imageURL="https://comicvine1.cbsistatic.com/uploads/scale_small/6/67663/7250738-05.jpg",
                releaseDate="2020-02-19",
                issueDate="2020-04-01",
            ),
        ],
    }


class WantedFactory:
    """Factory for getWanted rows, including columns the client ignores."""

    @staticmethod
    def create(issue_id: str = "135206", number: int = 2, **kwargs) -> Dict[str, Any]:
        data = {
            "Status": "Wanted",
            "ComicSize": None,
            "ComicName": "Hellblazer Special: Chas",
            "IssueID": issue_id,
            "DigitalDate": "0000-00-00",
            "IssueDate": "2008-10-24",
            "ImageURL": "https://comicvine1.cbsistatic.com/uploads/scale_small/6/67663/2788640-02.jpg",
            "inCacheDIR": None,
            "IssueDate_Edit": None,
            "ImageURL_ALT": "https://comicvine1.cbsistatic.com/uploads/scale_medium/6/67663/2788640-02.jpg",
            "ReleaseDate": "0000-00-00",
            "ArtworkURL": None,
            "Issue_Number": str(number),
            "Location": None,
            "Int_IssueNumber": number * 1000,
            "IssueName": f"chapter {number}",
            "ComicID": "22530",
            "Type": None,
            "AltIssueNumber": None,
            "DateAdded": "2020-05-04",
        }
        data.update(kwargs)
        return data


def wanted_body() -> str:
    """Raw getWanted body: a bare JSON array of three rows."""
    rows = [
        WantedFactory.create("135206", 2),
        WantedFactory.create("137432", 3, ReleaseDate="2008-09-04"),
        WantedFactory.create("139705", 4),
    ]
    return json.dumps(rows)


class HistoryFactory:
    """Factory for history log payloads."""

    @staticmethod
    def post_processed(**kwargs) -> Dict[str, Any]:
        data = {
            "Status": "Post-Processed",
            "ComicName": "Zombie Tramp",
            "IssueID": "454352",
            "crc": "b8f7ebd8c7f700ff253503a467add14b",
            "Issue_Number": "0",
            "ComicID": "75908",
            "Provider": "",
            "DateAdded": "2020-04-30 06:38:34",
        }
        data.update(kwargs)
        return data

    @staticmethod
    def snatched(**kwargs) -> Dict[str, Any]:
        data = {
            "Status": "Snatched",
            "ComicName": "Zombie Tramp",
            "IssueID": "454352",
            "crc": "",
            "Issue_Number": "0",
            "ComicID": "75908",
            "Provider": "nzbhydra2 (newznab)",
            "DateAdded": "2020-04-30 06:38:03",
        }
        data.update(kwargs)
        return data
