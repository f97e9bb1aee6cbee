"""Generic combinators: sequencing, branching, repetition and meta.

Combinators never inspect buffer contents; they only call sub-parsers and
observe outcomes, so every combinator works in both text and binary mode.
"""

from .branch import alt, permutation
from .meta import (
    all_consuming,
    complete,
    cond,
    consumed,
    cut,
    dbg_dmp,
    eof,
    fail,
    flat_map,
    map,
    map_parser,
    map_res,
    not_,
    opt,
    peek,
    recognize,
    rest,
    rest_len,
    success,
    value,
    verify,
)
from .multi import (
    count,
    fold_many0,
    fold_many1,
    fold_many_m_n,
    length_count,
    length_data,
    length_value,
    many0,
    many0_count,
    many1,
    many1_count,
    many_m_n,
    many_till,
    separated_list0,
    separated_list1,
)
from .sequence import delimited, pair, preceded, separated_pair, sequence, terminated

__all__ = [
    "all_consuming",
    "alt",
    "complete",
    "cond",
    "consumed",
    "count",
    "cut",
    "dbg_dmp",
    "delimited",
    "eof",
    "fail",
    "flat_map",
    "fold_many0",
    "fold_many1",
    "fold_many_m_n",
    "length_count",
    "length_data",
    "length_value",
    "many0",
    "many0_count",
    "many1",
    "many1_count",
    "many_m_n",
    "many_till",
    "map",
    "map_parser",
    "map_res",
    "not_",
    "opt",
    "pair",
    "peek",
    "permutation",
    "preceded",
    "recognize",
    "rest",
    "rest_len",
    "separated_list0",
    "separated_list1",
    "separated_pair",
    "sequence",
    "success",
    "terminated",
    "value",
    "verify",
]
