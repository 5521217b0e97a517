from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List


class Mappable(ABC):
    """
    Abstract Base Class for everything that renders to an Elasticsearch
    document fragment (queries, aggregations, highlights, requests).
    """

    @abstractmethod
    def map(self) -> Dict[str, Any]:
        """
        Converts the builder into a generic, JSON-ready dictionary.

        Returns:
            The nested dictionary accepted by the Elasticsearch DSL.
        """
        pass


class Aggregation(Mappable):
    """
    An aggregation is a Mappable that also carries the name it is
    registered under in the "aggs" section of a request.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass


def maps(items: Iterable[Mappable]) -> List[Dict[str, Any]]:
    return [item.map() for item in items]


def aggregations_map(aggs: Iterable[Aggregation]) -> Dict[str, Any]:
    """Render aggregations keyed by their names, keeping insertion order."""
    return {agg.name: agg.map() for agg in aggs}
