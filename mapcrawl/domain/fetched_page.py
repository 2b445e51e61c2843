from typing import NamedTuple, Optional


class FetchedPage(NamedTuple):
    """One page as the transport returned it.

    A missing Content-Type is treated as HTML; servers often omit it on
    plain pages and skipping those would lose links.
    """

    url: str
    status_code: int
    body: str
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_html(self) -> bool:
        if not self.content_type:
            return True
        return "html" in self.content_type.lower()
