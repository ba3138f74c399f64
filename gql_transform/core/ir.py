"""Template data model for transformed GraphQL documents.

These dataclasses are what templates see. Attribute names and nesting are
part of the template contract, so keep them stable.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class FieldArgument:
    """An argument provided to a field."""
    name: str
    # Serialized GraphQL value, e.g. `true`, `$id` or `[a, b]`
    value: str


@dataclass
class GraphqlField:
    """A field selected in a query, mutation or fragment.

    A plain field has ``is_spread`` False. A fragment spread has ``is_spread``
    True and ``name`` set to the spread fragment. An inline fragment has
    ``is_spread`` True, an empty ``name`` and ``source_type`` set to its type
    condition.
    """
    name: str = ""
    is_spread: bool = False
    # Only set for inline fragments
    source_type: str = ""
    # None when the field takes no arguments
    arguments: list[FieldArgument] | None = None
    # None when the field has no selection set
    sub_fields: list["GraphqlField"] | None = None

    @property
    def is_inline_fragment(self) -> bool:
        return self.is_spread and not self.name


@dataclass
class Fragment:
    """A named fragment defined in a document."""
    name: str
    source_type: str
    fields: list[GraphqlField] = field(default_factory=list)
    # Names of every fragment spread inside ``fields``, in order and with
    # repeats. None when the fragment spreads nothing. There is no guarantee
    # these fragments are defined in the same document.
    fragment_dependencies: list[str] | None = None

    @property
    def dependency_count(self) -> int:
        return len(self.fragment_dependencies or [])


@dataclass
class Variable:
    """A variable accepted by an operation."""
    # Without the leading `$`
    name: str
    # Serialized type, e.g. `String!` or `[Int]`
    type: str


@dataclass
class Operation:
    """A query or mutation."""
    # Empty for anonymous operations
    name: str = ""
    variables: list[Variable] = field(default_factory=list)
    fields: list[GraphqlField] = field(default_factory=list)


@dataclass
class TemplateData:
    """Aggregate handed to the template.

    Queries and mutations are kept apart only for template convenience.
    """
    fragments: list[Fragment] = field(default_factory=list)
    queries: list[Operation] = field(default_factory=list)
    mutations: list[Operation] = field(default_factory=list)

    def extend(self, other: "TemplateData") -> "TemplateData":
        """Append another document's results after this one's."""
        self.fragments.extend(other.fragments)
        self.queries.extend(other.queries)
        self.mutations.extend(other.mutations)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the data as plain dicts and lists, ready for JSON."""
        return asdict(self)
