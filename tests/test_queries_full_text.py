from __future__ import annotations

import pytest

from es_query_maker import (
    Match,
    MatchAll,
    MatchBoolPrefix,
    MatchNone,
    MatchOperator,
    MatchPhrase,
    MatchPhrasePrefix,
    MultiMatch,
    MultiMatchType,
    QueryBuildError,
    ZeroTerms,
)


def test_match_always_renders_expanded_form():
    assert Match("title", "sample text").map() == {
        "match": {"title": {"query": "sample text"}}
    }


def test_match_with_all_options():
    q = (
        Match("issue_number")
        .query(16)
        .analyzer("standard")
        .auto_generate_synonyms_phrase_query(True)
        .fuzziness("AUTO")
        .max_expansions(50)
        .prefix_length(1)
        .transpositions(False)
        .fuzzy_rewrite("constant_score")
        .lenient(True)
        .operator(MatchOperator.AND)
        .minimum_should_match("75%")
        .slop(2)
        .zero_terms_query(ZeroTerms.ALL)
    )
    assert q.map() == {
        "match": {
            "issue_number": {
                "query": 16,
                "analyzer": "standard",
                "auto_generate_synonyms_phrase_query": True,
                "fuzziness": "AUTO",
                "max_expansions": 50,
                "prefix_length": 1,
                "transpositions": False,
                "fuzzy_rewrite": "constant_score",
                "lenient": True,
                "operator": "AND",
                "minimum_should_match": "75%",
                "slop": 2,
                "zero_terms_query": "all",
            }
        }
    }


@pytest.mark.parametrize(
    "cls,key",
    [
        (MatchBoolPrefix, "match_bool_prefix"),
        (MatchPhrase, "match_phrase"),
        (MatchPhrasePrefix, "match_phrase_prefix"),
    ],
)
def test_match_variants_render_under_their_own_key(cls, key):
    assert cls("message", "quick brown f").map() == {
        key: {"message": {"query": "quick brown f"}}
    }


def test_match_operator_accepts_plain_strings():
    q = Match("title", "a b").operator("OR")
    assert q.map()["match"]["title"]["operator"] == "OR"


def test_match_rejects_negative_unsigned_options():
    with pytest.raises(QueryBuildError):
        Match("title", "x").max_expansions(-1)


def test_match_rejects_unknown_zero_terms_value():
    with pytest.raises(QueryBuildError):
        Match("title", "x").zero_terms_query("some")


def test_match_rejects_empty_field():
    with pytest.raises(QueryBuildError):
        Match("", "x")


def test_multi_match():
    q = (
        MultiMatch("this is a test")
        .fields("subject^3", "message")
        .type(MultiMatchType.BEST_FIELDS)
        .tie_breaker(0.3)
        .operator(MatchOperator.AND)
        .boost(2)
    )
    assert q.map() == {
        "multi_match": {
            "query": "this is a test",
            "fields": ["subject^3", "message"],
            "type": "best_fields",
            "tie_breaker": 0.3,
            "operator": "AND",
            "boost": 2.0,
        }
    }


def test_multi_match_without_options_is_empty_object():
    assert MultiMatch().map() == {"multi_match": {}}


def test_match_all_and_match_none():
    assert MatchAll().map() == {"match_all": {}}
    assert MatchAll().boost(1.2).map() == {"match_all": {"boost": 1.2}}
    assert MatchNone().map() == {"match_none": {}}


def test_fuzziness_accepts_integers_and_strings():
    assert Match("title", "x").fuzziness(1).map()["match"]["title"]["fuzziness"] == 1
    assert MultiMatch("x").fuzziness("AUTO:3,6").map()["multi_match"]["fuzziness"] == "AUTO:3,6"


def test_multi_match_fields_accepts_a_single_list():
    assert MultiMatch("q").fields(["a", "b"]).map() == {
        "multi_match": {"query": "q", "fields": ["a", "b"]}
    }
