from datetime import timedelta

import pytest

from es_query_maker.exceptions import QueryBuildError
from es_query_maker.utils import (
    flatten_values,
    format_timeout,
    validate_field_name,
    validate_field_names,
)


def test_validate_field_name_accepts_elasticsearch_names():
    for name in ("title", "user.name", "@timestamp", "host-name", "title^2", "*.raw"):
        assert validate_field_name(name) == name


@pytest.mark.parametrize("bad", ["", " title", "title ", None, 3])
def test_validate_field_name_rejects(bad):
    with pytest.raises(QueryBuildError):
        validate_field_name(bad)


def test_validate_field_names_reports_what():
    with pytest.raises(QueryBuildError, match="index name"):
        validate_field_names(["ok", ""], what="index")


def test_format_timeout():
    assert format_timeout(timedelta(minutes=1)) == "60s"
    assert format_timeout(3) == "3s"
    assert format_timeout(0.6) == "1s"
    with pytest.raises(QueryBuildError):
        format_timeout(-1)
    with pytest.raises(QueryBuildError):
        format_timeout("10s")
    with pytest.raises(QueryBuildError):
        format_timeout(True)


def test_flatten_values():
    assert flatten_values(("a", "b")) == ["a", "b"]
    assert flatten_values((["a", "b"],)) == ["a", "b"]
    assert flatten_values((("a",),)) == ["a"]
    assert flatten_values(()) == []
