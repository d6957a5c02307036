from .base import BaseCriteriaCompiler
from .criteria import CriteriaCompiler, criteria_compiler
from .tree import CriteriaTreeCompiler, tree_compiler
from .utils import SubpredicateShape, classify_subpredicate

__all__ = (
    "BaseCriteriaCompiler",
    "CriteriaCompiler",
    "criteria_compiler",
    "CriteriaTreeCompiler",
    "tree_compiler",
    "SubpredicateShape",
    "classify_subpredicate",
)
