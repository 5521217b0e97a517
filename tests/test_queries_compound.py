import unittest

from es_query_maker import (
    Bool,
    Boosting,
    ConstantScore,
    DisMax,
    Exists,
    Match,
    QueryBuildError,
    Range,
    Term,
)


class TestBool(unittest.TestCase):
    def test_empty_bool(self):
        self.assertEqual(Bool().map(), {"bool": {}})

    def test_single_child_is_still_an_array(self):
        q = Bool().must(Term("user", "kimchy"))
        self.assertEqual(
            q.map(), {"bool": {"must": [{"term": {"user": {"value": "kimchy"}}}]}}
        )

    def test_all_clauses(self):
        q = (
            Bool()
            .must(Term("user", "kimchy"))
            .filter(Term("tag", "tech"))
            .must_not(Range("age").gte(10).lte(20))
            .should(Term("tag", "wow"), Term("tag", "elasticsearch"))
            .minimum_should_match(1)
            .boost(1.1)
        )
        expected = {
            "bool": {
                "must": [{"term": {"user": {"value": "kimchy"}}}],
                "filter": [{"term": {"tag": {"value": "tech"}}}],
                "must_not": [{"range": {"age": {"gte": 10, "lte": 20}}}],
                "should": [
                    {"term": {"tag": {"value": "wow"}}},
                    {"term": {"tag": {"value": "elasticsearch"}}},
                ],
                "minimum_should_match": 1,
                "boost": 1.1,
            }
        }
        self.assertEqual(q.map(), expected)

    def test_clause_setters_accumulate(self):
        q = Bool().must(Exists("a")).must(Exists("b"))
        self.assertEqual(
            q.map()["bool"]["must"],
            [{"exists": {"field": "a"}}, {"exists": {"field": "b"}}],
        )

    def test_nested_bool(self):
        q = Bool().should(Bool().must(Exists("a")), Exists("b"))
        self.assertEqual(
            q.map(),
            {
                "bool": {
                    "should": [
                        {"bool": {"must": [{"exists": {"field": "a"}}]}},
                        {"exists": {"field": "b"}},
                    ]
                }
            },
        )

    def test_rejects_non_query_children(self):
        with self.assertRaises(QueryBuildError):
            Bool().must({"term": {"a": 1}})


class TestOtherCompoundQueries(unittest.TestCase):
    def test_boosting(self):
        q = (
            Boosting()
            .positive(Term("text", "apple"))
            .negative(Term("text", "pie tart fruit crumble tree"))
            .negative_boost(0.5)
        )
        self.assertEqual(
            q.map(),
            {
                "boosting": {
                    "positive": {"term": {"text": {"value": "apple"}}},
                    "negative": {
                        "term": {"text": {"value": "pie tart fruit crumble tree"}}
                    },
                    "negative_boost": 0.5,
                }
            },
        )

    def test_constant_score(self):
        q = ConstantScore(Term("user", "kimchy")).boost(2.2)
        self.assertEqual(
            q.map(),
            {
                "constant_score": {
                    "filter": {"term": {"user": {"value": "kimchy"}}},
                    "boost": 2.2,
                }
            },
        )

    def test_dis_max(self):
        q = DisMax(Term("title", "Quick pets"), Match("body", "Quick pets")).tie_breaker(0.7)
        self.assertEqual(
            q.map(),
            {
                "dis_max": {
                    "queries": [
                        {"term": {"title": {"value": "Quick pets"}}},
                        {"match": {"body": {"query": "Quick pets"}}},
                    ],
                    "tie_breaker": 0.7,
                }
            },
        )

    def test_dis_max_single_query_is_an_array(self):
        self.assertEqual(
            DisMax(Exists("a")).map(),
            {"dis_max": {"queries": [{"exists": {"field": "a"}}]}},
        )


if __name__ == "__main__":
    unittest.main()
