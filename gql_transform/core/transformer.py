"""GraphQL document transformer using graphql-core.

Turns a parsed document into TemplateData: operations and fragments with
their selection sets flattened into GraphqlField trees, argument values and
variable types serialized back to GraphQL text.
"""

import logging

from graphql import (
    BooleanValueNode,
    DocumentNode,
    EnumValueNode,
    FieldNode,
    FloatValueNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLSyntaxError,
    InlineFragmentNode,
    IntValueNode,
    ListTypeNode,
    ListValueNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectValueNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    StringValueNode,
    TypeNode,
    ValueNode,
    VariableNode,
    parse,
)

from .errors import GrammarError, MalformedValueError, UnknownKindError
from .ir import FieldArgument, Fragment, GraphqlField, Operation, TemplateData, Variable

logger = logging.getLogger(__name__)

SCALAR_VALUE_NODES = (
    EnumValueNode,
    BooleanValueNode,
    IntValueNode,
    FloatValueNode,
    StringValueNode,
)


def transform_value(node: ValueNode) -> str:
    """Serialize an argument value node to GraphQL text.

    String literals are emitted as their raw value, without quotes.
    """
    if isinstance(node, VariableNode):
        return f"${node.name.value}"
    elif isinstance(node, ListValueNode):
        values = [transform_value(item) for item in node.values]
        return f"[{', '.join(values)}]"
    elif isinstance(node, SCALAR_VALUE_NODES):
        return _scalar_to_str(node)
    elif isinstance(node, ObjectValueNode):
        values = [f"{item.name.value}: {transform_value(item.value)}" for item in node.fields]
        return f"{{{', '.join(values)}}}"
    raise UnknownKindError("value", node.kind)


def _scalar_to_str(node: ValueNode) -> str:
    value = node.value
    # bool before str: graphql-core gives booleans as real bools
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if type(value).__str__ is not object.__str__:
        return str(value)
    raise MalformedValueError(node.kind, value)


def transform_arguments(field: FieldNode) -> list[FieldArgument] | None:
    """Serialize a field's arguments, or None when it has none."""
    if not field.arguments:
        return None
    return [
        FieldArgument(name=arg.name.value, value=transform_value(arg.value))
        for arg in field.arguments
    ]


def transform_selection_set(selection_set: SelectionSetNode) -> list[GraphqlField]:
    """Convert a selection set into GraphqlFields, keeping source order."""
    fields = []
    for selection in selection_set.selections:
        if isinstance(selection, FieldNode):
            sub_fields = None
            if selection.selection_set is not None:
                sub_fields = transform_selection_set(selection.selection_set)
            fields.append(
                GraphqlField(
                    name=selection.name.value,
                    arguments=transform_arguments(selection),
                    sub_fields=sub_fields,
                )
            )
        elif isinstance(selection, FragmentSpreadNode):
            fields.append(GraphqlField(name=selection.name.value, is_spread=True))
        elif isinstance(selection, InlineFragmentNode):
            type_condition = selection.type_condition
            fields.append(
                GraphqlField(
                    name="",
                    is_spread=True,
                    source_type=type_condition.name.value if type_condition else "",
                    sub_fields=transform_selection_set(selection.selection_set),
                )
            )
        else:
            raise UnknownKindError("selection", selection.kind)
    return fields


def transform_type(node: TypeNode) -> str:
    """Serialize a type reference, e.g. ``[ID!]!``."""
    if isinstance(node, NonNullTypeNode):
        return f"{transform_type(node.type)}!"
    elif isinstance(node, ListTypeNode):
        return f"[{transform_type(node.type)}]"
    elif isinstance(node, NamedTypeNode):
        return node.name.value
    raise UnknownKindError("type", node.kind)


def gather_fragment_dependencies(fields: list[GraphqlField]) -> list[str] | None:
    """Collect the names of all fragments spread anywhere in ``fields``.

    Names are kept in encounter order and are not deduplicated. Inline
    fragments are searched but do not count themselves. Returns None when
    nothing is spread.
    """
    names: list[str] = []
    for field in fields:
        if field.is_spread and field.name:
            names.append(field.name)
        if field.sub_fields:
            names.extend(gather_fragment_dependencies(field.sub_fields) or [])
    return names or None


def transform_fragment(definition: FragmentDefinitionNode) -> Fragment:
    fields = transform_selection_set(definition.selection_set)
    return Fragment(
        name=definition.name.value,
        source_type=definition.type_condition.name.value,
        fields=fields,
        fragment_dependencies=gather_fragment_dependencies(fields),
    )


def transform_operation(definition: OperationDefinitionNode) -> Operation:
    variables = [
        Variable(name=var_def.variable.name.value, type=transform_type(var_def.type))
        for var_def in definition.variable_definitions or ()
    ]
    fields = []
    if definition.selection_set is not None:
        fields = transform_selection_set(definition.selection_set)
    return Operation(
        name=definition.name.value if definition.name else "",
        variables=variables,
        fields=fields,
    )


def transform_document(document: DocumentNode) -> TemplateData:
    """Transform every definition of a parsed document.

    Returns a new TemplateData. Any unsupported definition or operation kind
    aborts the whole document.
    """
    if not isinstance(document, DocumentNode):
        raise UnknownKindError("document", getattr(document, "kind", type(document).__name__))

    data = TemplateData()
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            if definition.operation == OperationType.QUERY:
                data.queries.append(transform_operation(definition))
            elif definition.operation == OperationType.MUTATION:
                data.mutations.append(transform_operation(definition))
            else:
                raise UnknownKindError("operation", definition.operation.value)
        elif isinstance(definition, FragmentDefinitionNode):
            data.fragments.append(transform_fragment(definition))
        else:
            raise UnknownKindError("definition", definition.kind)

    logger.debug(
        "Transformed %d fragments, %d queries, %d mutations",
        len(data.fragments),
        len(data.queries),
        len(data.mutations),
    )
    return data


def transform_source(
    source: str,
    template_data: TemplateData | None = None,
    source_name: str | None = None,
) -> TemplateData:
    """Parse GraphQL source text and transform it.

    When ``template_data`` is given the results are appended to it, but only
    once the whole document transformed successfully.
    """
    try:
        document = parse(source, no_location=True)
    except GraphQLSyntaxError as e:
        raise GrammarError(e.message, source_name) from e

    data = transform_document(document)
    if template_data is None:
        return data
    return template_data.extend(data)


def sort_fragments(template_data: TemplateData) -> TemplateData:
    """Order fragments by how many fragment spreads they contain.

    The sort is stable, so fragments with equal counts keep their order.
    This only puts dependency-free fragments first; it is not a topological
    sort and fragments with equal counts may still depend on each other.
    """
    template_data.fragments.sort(key=lambda fragment: fragment.dependency_count)
    return template_data
