"""Blog Stats — pure aggregates over a list of blogs.

Invariants:
    - Inputs are mappings with at least likes (and title/author where projected)
    - Ties always resolve to the first occurrence in input order
    - Empty input: total_likes → 0, every "best of" aggregate → None
    - Never mutates the input

Design Decisions:
    - Single sum for every input length: one-element lists need no special case
    - Projections returned as fresh dicts, not the input mapping
"""

from collections.abc import Mapping, Sequence


def total_likes(blogs: Sequence[Mapping]) -> int:
    """Sum of likes across all blogs."""
    return sum(blog["likes"] for blog in blogs)


def favorite_blog(blogs: Sequence[Mapping]) -> dict | None:
    """Blog with the most likes, projected to {title, author, likes}."""
    favorite = None
    for blog in blogs:
        # strict > keeps the earliest blog on ties
        if favorite is None or blog["likes"] > favorite["likes"]:
            favorite = blog
    if favorite is None:
        return None
    return {
        "title": favorite["title"],
        "author": favorite.get("author"),
        "likes": favorite["likes"],
    }


def most_blogs(blogs: Sequence[Mapping]) -> dict | None:
    """Author with the largest number of blogs."""
    counts = _tally(blogs, lambda blog: 1)
    if not counts:
        return None
    author, count = _first_max(counts)
    return {"author": author, "blogs": count}


def most_likes(blogs: Sequence[Mapping]) -> dict | None:
    """Author whose blogs have the largest like total."""
    sums = _tally(blogs, lambda blog: blog["likes"])
    if not sums:
        return None
    author, likes = _first_max(sums)
    return {"author": author, "likes": likes}


def _tally(blogs: Sequence[Mapping], weight) -> dict:
    # dict preserves first-seen author order
    totals: dict = {}
    for blog in blogs:
        author = blog.get("author")
        totals[author] = totals.get(author, 0) + weight(blog)
    return totals


def _first_max(totals: dict) -> tuple:
    best = None
    for item in totals.items():
        if best is None or item[1] > best[1]:
            best = item
    return best
