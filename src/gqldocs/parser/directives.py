"""
Documentation directive extraction.

Reads @docGroup, @docPriority and @docTags from schema AST nodes and
validates their arguments. Malformed usage is logged and treated as
absent; it never fails the run.
"""

import logging
import re
from typing import Any

from graphql import value_from_ast_untyped
from graphql.language import DirectiveNode, Node
from pydantic import BaseModel, ValidationError

from gqldocs.models.schema import DocGroup, DocPriority, DocTags, OperationDirectives

logger = logging.getLogger(__name__)

# Definitions added to SDL that uses the directives without declaring them
DIRECTIVE_DEFINITIONS = {
    "docGroup": '''
"""
Groups operations into logical sections for documentation organization.
"""
directive @docGroup(
  """
  The name of the documentation section
  """
  name: String!

  """
  Display order of the section (lower numbers first)
  """
  order: Int

  """
  Optional subsection within the main section
  """
  subsection: String
) on FIELD_DEFINITION | OBJECT | INTERFACE | UNION | ENUM | ENUM_VALUE | INPUT_OBJECT | INPUT_FIELD_DEFINITION | SCALAR
''',
    "docPriority": '''
"""
Sets the display priority for ordering operations within a section.
"""
directive @docPriority(
  """
  Priority level (lower numbers appear first)
  """
  level: Int!
) on FIELD_DEFINITION
''',
    "docTags": '''
"""
Tags for filtering and categorizing operations.
"""
directive @docTags(
  """
  List of tags for this operation
  """
  tags: [String!]!
) on FIELD_DEFINITION
''',
}

# directive name -> (attribute on OperationDirectives, payload model)
_KNOWN_DIRECTIVES: dict[str, tuple[str, type[BaseModel]]] = {
    "docGroup": ("doc_group", DocGroup),
    "docPriority": ("doc_priority", DocPriority),
    "docTags": ("doc_tags", DocTags),
}


def missing_directive_definitions(sdl: str) -> str:
    """Return SDL for the documentation directives not declared in sdl."""
    missing = [
        definition
        for name, definition in DIRECTIVE_DEFINITIONS.items()
        if not re.search(rf"directive\s+@{name}\b", sdl)
    ]
    return "\n".join(missing)


class DirectiveExtractor:
    """Extracts documentation directives from AST nodes.

    Usage:
        extractor = DirectiveExtractor()
        directives = extractor.extract(field.ast_node)
    """

    def extract(self, node: Node | None) -> OperationDirectives:
        """Extract known directives from a node.

        Args:
            node: Field, type or enum value AST node. Schemas built from
                introspection have no AST; None yields empty directives.

        Returns:
            OperationDirectives with invalid or missing entries left None
        """
        directive_nodes = getattr(node, "directives", None) if node is not None else None
        if not directive_nodes:
            return OperationDirectives()

        values: dict[str, BaseModel] = {}
        for directive in directive_nodes:
            name = directive.name.value
            known = _KNOWN_DIRECTIVES.get(name)
            if known is None:
                continue

            attribute, model = known
            args = self._directive_args(directive)
            try:
                values[attribute] = model.model_validate(args)
            except ValidationError as e:
                errors = "; ".join(
                    f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
                )
                logger.warning(f"Invalid @{name} usage ignored: {errors}")

        return OperationDirectives(**values)

    @staticmethod
    def _directive_args(directive: DirectiveNode) -> dict[str, Any]:
        return {
            arg.name.value: value_from_ast_untyped(arg.value) for arg in directive.arguments or ()
        }
