"""Advisory rules, registered in evaluation order."""

from plansight.analyzer.rules.base import Rule
from plansight.analyzer.rules.seq_scan import SeqScan
from plansight.analyzer.rules.index_scan import IndexScan
from plansight.analyzer.rules.sort_keys import SortKeys
from plansight.analyzer.rules.hash_join import HashJoin

__all__ = [
    "Rule",
    "SeqScan",
    "IndexScan",
    "SortKeys",
    "HashJoin",
]
