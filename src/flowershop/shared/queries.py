"""Helpers for running repository queries to completion."""


def fetch_all(query) -> list:
    """Return every record matching `query`, whatever its page size.

    Protean querysets are paged; the first page reports the total match count,
    which is used to fetch the rest in one more call when needed.
    """
    page = query.all()
    if page.total <= len(page.items):
        return page.items
    return query.limit(page.total).all().items
