"""Exceptions raised while building or running Elasticsearch requests."""


class QueryBuildError(ValueError):
    """A builder received an invalid value or could not be rendered."""


class InvalidRequestError(QueryBuildError):
    """A request is missing a part it needs before it can be run."""
