"""Shared HTML fixtures shaped like the three banner pages."""

import pytest

from banner_roster.sources import RosterSource, get_sources


def _agent(name: str, rank: str) -> str:
    return f'<span class="agent"><a href="/wiki/{name.replace(" ", "_")}">{name}</a> ({rank})</span>'


def zzz_table(*agents: tuple[str, str], label: str = "Rate-Up Agents") -> str:
    cell = "".join(_agent(name, rank) for name, rank in agents)
    return (
        '<table class="wikitable">'
        "<tr><th>Duration</th><td>2024/07/04 - 2024/07/24</td></tr>"
        f"<tr><th>{label}</th><td>{cell}</td></tr>"
        "</table>"
    )


def genshin_table(*alts: str | None, label: str = "5-star Rate Up") -> str:
    images = "".join(
        f'<img src="/x.png" alt="{alt}">' if alt is not None else '<img src="/x.png">'
        for alt in alts
    )
    return (
        '<table class="wikitable">'
        "<tr><th>Period</th><td>Version 5.0 Phase 1</td></tr>"
        f"<tr><th>{label}</th><td>{images}</td></tr>"
        "<tr><th>4-star Rate Up</th><td>"
        '<img alt="Genshin - Xiangling"><img alt="Genshin - Bennett">'
        "</td></tr>"
        "</table>"
    )


def _links(names: list[str]) -> str:
    return "".join(f'<a href="/wiki/{name}">{name}</a>' for name in names)


def starrail_page(
    rows: list[tuple[str, list[str]]], heading: str = "Current Warp Banner Dates"
) -> str:
    body = "".join(
        f"<tr><td>{banner}</td><td>{_links(names)}</td></tr>" for banner, names in rows
    )
    return (
        "<html><body>"
        '<h2><span class="mw-headline">Overview</span></h2>'
        "<table><tr><td>Intro (Current)</td><td><a>Decoy</a></td></tr></table>"
        f'<h2><span class="mw-headline">{heading}</span></h2>'
        "<p>Dates are shown in server time.</p>"
        '<table class="wikitable">'
        "<tr><th>Banner</th><th>Featured</th></tr>"
        f"{body}"
        "</table>"
        "</body></html>"
    )


@pytest.fixture
def zzz_html() -> str:
    return (
        "<html><body>"
        '<table><tr><th>Standard Agents</th><td><span><a>Nekomata</a> (S-Rank)</span></td></tr></table>'
        + zzz_table(("Ellen", "S-Rank"), ("Soukaku", "A-Rank"))
        + zzz_table(("Zhu Yuan", "S-Rank"), ("Ellen", "S-Rank"), ("Anby", "A-Rank"))
        + zzz_table(("Jane", "S-Rank"))
        + "</body></html>"
    )


@pytest.fixture
def genshin_html() -> str:
    return (
        "<html><body>"
        + genshin_table("Genshin - Alpha", "Pyro", "Genshin - Beta")
        + genshin_table("Genshin - Gamma")
        + "</body></html>"
    )


@pytest.fixture
def starrail_html() -> str:
    return starrail_page(
        [
            ("Butterfly on Swordtip (Current)", ["Acheron", "Pela"]),
            ("Nessun Dorma", ["Kafka", "Luka"]),
        ]
    )


@pytest.fixture
def genshin_source() -> RosterSource:
    return get_sources()["genshin"]


@pytest.fixture
def starrail_source() -> RosterSource:
    return get_sources()["starrail"]


@pytest.fixture
def zzz_source() -> RosterSource:
    return get_sources()["zzz"]
