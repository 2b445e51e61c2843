from mapcrawl.domain.adjacency_store import AdjacencyStore

CONNECTOR = "|__"
INDENT = "\t"


class SiteMapRenderer:
    """Renders the recorded link graph as an indented tree.

    Each child goes on its own line, indented by one tab per level and
    prefixed with `|__`. Rendering stops expanding once `level` reaches
    `max_depth`, so the tree never goes deeper than the crawl did.
    """

    def __init__(self, adjacency_store: AdjacencyStore):
        self.adjacency_store = adjacency_store

    def render(self, url: str, max_depth: int, level: int = 1) -> str:
        if level >= max_depth:
            return url

        lines = [url]
        for child in self.adjacency_store.children(url) or ():
            lines.append(INDENT * level + CONNECTOR + self.render(child, max_depth, level + 1))
        return "\n".join(lines)
