"""
Banner locators for the supported wiki pages.

Each game's banner page puts the rate-up characters somewhere different, so
each game gets one locator. A locator does two things: find the name-bearing
regions of the page in document order (locate), and pull raw name candidates
out of one region (candidates). Everything after that (normalization,
filtering, dedup) is shared and lives in normalize.py.

Which duplicate region gets picked changes the roster, so the halt
conditions here are deliberate:

- ZZZ reads the "Rate-Up Agents" row of the first two tables that have one.
- Genshin reads the first "5-star Rate Up" row, moving on to the next table
  only while nothing has been accepted yet (stop_after_first_hit).
- Star Rail reads the "(Current)" rows of the table right after the banner
  dates heading.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

log = logging.getLogger(__name__)

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _text(element: Tag) -> str:
    return element.get_text().strip()


def _first_header_text(row: Tag) -> str | None:
    header = row.find("th")
    if header is None:
        return None
    return _text(header)


def _link_texts(region: Tag) -> Iterator[str]:
    for link in region.find_all("a"):
        yield _text(link)


class BannerLocator(ABC):
    name: str = ""
    stop_after_first_hit: bool = False

    @abstractmethod
    def locate(self, soup: BeautifulSoup) -> Iterator[Tag]:
        """Yield name-bearing regions in document order."""

    @abstractmethod
    def candidates(self, region: Tag) -> Iterator[str]:
        """Yield raw name candidates from one region, before normalization."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _HeaderRowLocator(BannerLocator):
    """Tables whose rows are labelled by a leading <th>, names in the first <td>."""

    row_label: str = ""
    max_tables: int | None = None

    def locate(self, soup: BeautifulSoup) -> Iterator[Tag]:
        qualifying = 0
        for table in soup.find_all("table"):
            for row in table.find_all("tr"):
                if _first_header_text(row) != self.row_label:
                    continue
                cell = row.find("td")
                if cell is not None:
                    yield cell
                qualifying += 1
                break
            if self.max_tables is not None and qualifying >= self.max_tables:
                return


class RateUpAgentsLocator(_HeaderRowLocator):
    name = "zzz"
    row_label = "Rate-Up Agents"
    max_tables = 2
    s_rank_marker = "(S-Rank)"

    def candidates(self, region: Tag) -> Iterator[str]:
        for link in region.find_all("a"):
            context = link.parent.get_text() if link.parent is not None else ""
            if self.s_rank_marker not in context:
                log.debug("Skipping non S-Rank agent link %r", _text(link))
                continue
            yield _text(link)


class FiveStarRateUpLocator(_HeaderRowLocator):
    name = "genshin"
    row_label = "5-star Rate Up"
    stop_after_first_hit = True

    def candidates(self, region: Tag) -> Iterator[str]:
        for image in region.find_all("img"):
            alt = image.get("alt")
            if alt is None:
                continue
            yield alt


class CurrentWarpLocator(BannerLocator):
    name = "starrail"
    heading_phrase = "Banner Dates"
    current_marker = "(Current)"

    def _banner_table(self, soup: BeautifulSoup) -> Tag | None:
        for heading in soup.find_all(_HEADING_TAGS):
            if self.heading_phrase in _text(heading):
                table = heading.find_next_sibling("table")
                if table is None:
                    log.debug("Heading %r has no following table", _text(heading))
                return table
        return None

    def locate(self, soup: BeautifulSoup) -> Iterator[Tag]:
        table = self._banner_table(soup)
        if table is None:
            return
        for row in table.find_all("tr"):
            cells = row.find_all(["td", "th"], recursive=False)
            if len(cells) < 2:
                continue
            if self.current_marker not in _text(cells[0]):
                continue
            yield cells[1]

    def candidates(self, region: Tag) -> Iterator[str]:
        yield from _link_texts(region)
