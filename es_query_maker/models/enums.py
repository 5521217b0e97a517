from enum import Enum


class MatchOperator(str, Enum):
    OR = "OR"
    AND = "AND"


class ZeroTerms(str, Enum):
    NONE = "none"
    ALL = "all"


class MultiMatchType(str, Enum):
    BEST_FIELDS = "best_fields"
    MOST_FIELDS = "most_fields"
    CROSS_FIELDS = "cross_fields"
    PHRASE = "phrase"
    PHRASE_PREFIX = "phrase_prefix"
    BOOL_PREFIX = "bool_prefix"


class RangeRelation(str, Enum):
    INTERSECTS = "INTERSECTS"
    CONTAINS = "CONTAINS"
    WITHIN = "WITHIN"


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Highlighting
class HighlightType(str, Enum):
    UNIFIED = "unified"
    PLAIN = "plain"
    FVH = "fvh"


class HighlightBoundaryScanner(str, Enum):
    CHARS = "chars"
    SENTENCE = "sentence"
    WORD = "word"


class HighlightEncoder(str, Enum):
    DEFAULT = "default"
    HTML = "html"


class HighlightFragmenter(str, Enum):
    SIMPLE = "simple"
    SPAN = "span"


class HighlightOrder(str, Enum):
    NONE = "none"
    SCORE = "score"


class HighlightTagsSchema(str, Enum):
    STYLED = "styled"
