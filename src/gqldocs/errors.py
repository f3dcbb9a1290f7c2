"""Exception base class shared by gqldocs components."""


class GqlDocsError(Exception):
    """Base exception for documentation generation failures."""

    pass
