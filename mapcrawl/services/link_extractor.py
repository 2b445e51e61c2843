from typing import List

from bs4 import BeautifulSoup


class LinkExtractor:
    """Pulls raw anchor targets out of an HTML page, in document order."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def extract_hrefs(self, html: str) -> List[str]:
        soup = BeautifulSoup(html, self.parser)
        return [a.get("href", "") for a in soup.find_all("a", href=True)]
