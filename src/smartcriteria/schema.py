"""Pydantic models for smart folder criteria."""

from typing import TYPE_CHECKING, Annotated, Iterator, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import CriteriaCondition, CriteriaOperator

if TYPE_CHECKING:
    from .diagnostics import Diagnostics
    from .predicates import Predicate


class Criteria(BaseModel):
    """A single filter clause: field, operator, value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["criteria"] = "criteria"
    field: str = Field(..., description="Article field the clause filters on.")
    operator_type: CriteriaOperator = Field(CriteriaOperator.EQUAL_TO, description="Comparison to apply.")
    value: str = Field("", description="Value compared against; dates may be relative, e.g. '3 days'.")

    def __str__(self) -> str:
        return f"{self.field} {self.operator_type.value} {self.value!r}"

    def to_predicate(self, diagnostics: Optional["Diagnostics"] = None) -> "Predicate":
        """Compile this clause into a native predicate."""
        from .compilers.criteria import criteria_compiler

        return criteria_compiler.build(self, diagnostics)

    @classmethod
    def from_predicate(
        cls,
        predicate: "Predicate",
        not_contains: bool = False,
        diagnostics: Optional["Diagnostics"] = None,
    ) -> Optional["Criteria"]:
        """Parse a comparison predicate; returns None for any other predicate kind."""
        from .compilers.criteria import criteria_compiler

        return criteria_compiler.parse(predicate, not_contains=not_contains, diagnostics=diagnostics)


class CriteriaTree(BaseModel):
    """A composite clause: a condition over an ordered list of clauses."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tree"] = "tree"
    condition: CriteriaCondition = Field(CriteriaCondition.ALL, description="How child clauses combine.")
    criteria_tree: Tuple["CriteriaElement", ...] = Field((), description="Child clauses in display order.")

    def __str__(self) -> str:
        inner = ", ".join(str(element) for element in self.criteria_tree)
        return f"{self.condition.value}({inner})"

    def walk(self) -> Iterator[Criteria]:
        """Yield every leaf clause depth-first, in display order."""
        for element in self.criteria_tree:
            if isinstance(element, CriteriaTree):
                yield from element.walk()
            else:
                yield element

    def with_element(self, element: "CriteriaElement") -> "CriteriaTree":
        """Return a copy of this tree with `element` appended."""
        return self.model_copy(update={"criteria_tree": self.criteria_tree + (element,)})

    def to_predicate(self, diagnostics: Optional["Diagnostics"] = None) -> "Predicate":
        """Compile this tree into a native compound predicate."""
        from .compilers.tree import tree_compiler

        return tree_compiler.build(self, diagnostics)

    @classmethod
    def from_predicate(
        cls,
        predicate: "Predicate",
        diagnostics: Optional["Diagnostics"] = None,
    ) -> Optional["CriteriaTree"]:
        """Parse a compound predicate; returns None if it cannot be understood."""
        from .compilers.tree import tree_compiler

        return tree_compiler.parse(predicate, diagnostics=diagnostics)


CriteriaElement = Annotated[Union[Criteria, CriteriaTree], Field(discriminator="kind")]

CriteriaTree.model_rebuild()
