from .compound import Bool, Boosting, ConstantScore, DisMax
from .custom import CustomQuery
from .full_text import (
    Match,
    MatchAll,
    MatchBoolPrefix,
    MatchNone,
    MatchPhrase,
    MatchPhrasePrefix,
    MatchQuery,
    MultiMatch,
)
from .highlight import Highlight
from .term_level import (
    IDs,
    Exists,
    Fuzzy,
    Prefix,
    Range,
    Regexp,
    Term,
    Terms,
    TermsSet,
    Wildcard,
)

__all__ = [
    "Bool",
    "Boosting",
    "ConstantScore",
    "DisMax",
    "CustomQuery",
    "Match",
    "MatchAll",
    "MatchBoolPrefix",
    "MatchNone",
    "MatchPhrase",
    "MatchPhrasePrefix",
    "MatchQuery",
    "MultiMatch",
    "Highlight",
    "IDs",
    "Exists",
    "Fuzzy",
    "Prefix",
    "Range",
    "Regexp",
    "Term",
    "Terms",
    "TermsSet",
    "Wildcard",
]
