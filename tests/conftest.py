"""
gqldocs Test Configuration and Fixtures

This module provides pytest fixtures for testing the documentation generator.
All fixtures are deterministic and never touch the network.

Fixture Categories:
- Paths: fixture schema and metadata locations
- Type Definitions: small hand-built registries for expansion tests
- Operations: builders for parsed and expanded operations
- Environment: isolation from GQLDOCS_* variables and .env files
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from gqldocs.config import reset_config, reset_environment
from gqldocs.models import (
    DocGroup,
    DocPriority,
    EnumValueDefinition,
    ExpandedOperation,
    ExpandedScalar,
    Operation,
    OperationDirectives,
    OperationType,
    TypeDefinition,
    TypeField,
    TypeKind,
)

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def schema_path(fixtures_dir: Path) -> Path:
    """Return the sample SDL schema."""
    return fixtures_dir / "schema.graphql"


@pytest.fixture
def metadata_dir(fixtures_dir: Path) -> Path:
    """Return the sample metadata root."""
    return fixtures_dir / "metadata"


# =============================================================================
# Environment Isolation
# =============================================================================

_GQLDOCS_ENV_VARS = [
    "GQLDOCS_CONFIG",
    "GQLDOCS_SCHEMA",
    "GQLDOCS_OUTPUT_DIR",
    "GQLDOCS_METADATA_DIR",
    "GQLDOCS_SINGLE_PAGE",
    "GQLDOCS_MAX_DEPTH",
    "GQLDOCS_DEFAULT_LEVELS",
    "GQLDOCS_LOG_LEVEL",
    "GQLDOCS_LOG_FILE",
    "GQLDOCS_SCHEMA_TOKEN",
    "GQLDOCS_SCHEMA_AUTH_HEADER",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep every test independent of the shell and of .env files."""
    import gqldocs.config.environment as env_module

    reset_config()
    reset_environment()
    for var in _GQLDOCS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(env_module, "_dotenv_loaded", True)

    yield

    reset_config()
    reset_environment()


# =============================================================================
# Type Definition Fixtures
# =============================================================================


def scalar(name: str) -> TypeDefinition:
    """Build a scalar definition."""
    return TypeDefinition(name=name, kind=TypeKind.SCALAR)


def field(name: str, type_ref: str, **kwargs) -> TypeField:
    """Build a field, deriving required/list flags from the type string."""
    return TypeField(
        name=name,
        type=type_ref,
        is_required=type_ref.endswith("!"),
        is_list=type_ref.lstrip().startswith("["),
        **kwargs,
    )


def obj(name: str, *fields: TypeField, kind: TypeKind = TypeKind.OBJECT, **kwargs) -> TypeDefinition:
    """Build an object-like definition."""
    return TypeDefinition(name=name, kind=kind, fields=list(fields), **kwargs)


@pytest.fixture
def builtin_scalars() -> list[TypeDefinition]:
    """Standard GraphQL scalars."""
    return [scalar(name) for name in ("ID", "String", "Int", "Float", "Boolean")]


@pytest.fixture
def user_types(builtin_scalars) -> list[TypeDefinition]:
    """A small graph with a self reference, an enum, a union and an input."""
    return [
        *builtin_scalars,
        obj(
            "User",
            field("id", "ID!"),
            field("name", "String"),
            field("role", "Role!"),
            field("friends", "[User]"),
            field("posts", "[Post!]!"),
            description="A user",
        ),
        obj("Post", field("title", "String!"), field("author", "User!")),
        TypeDefinition(
            name="Role",
            kind=TypeKind.ENUM,
            enum_values=[
                EnumValueDefinition(name="ADMIN"),
                EnumValueDefinition(name="GUEST", is_deprecated=True, deprecation_reason="Gone"),
            ],
        ),
        TypeDefinition(name="SearchResult", kind=TypeKind.UNION, possible_types=["User", "Post"]),
        obj("UserFilter", field("role", "Role"), field("and", "[UserFilter!]"), kind=TypeKind.INPUT_OBJECT),
    ]


@pytest.fixture
def diamond_types(builtin_scalars) -> list[TypeDefinition]:
    """type A { b: B } type B { c: C, d: C } type C { value: String }"""
    return [
        *builtin_scalars,
        obj("A", field("b", "B")),
        obj("B", field("c", "C"), field("d", "C")),
        obj("C", field("value", "String")),
    ]


@pytest.fixture
def chain_types(builtin_scalars) -> list[TypeDefinition]:
    """A ten-level chain L0 -> L1 -> ... -> L9 with no cycles."""
    types = list(builtin_scalars)
    for i in range(10):
        fields = [field("id", "ID!")]
        if i < 9:
            fields.append(field("next", f"L{i + 1}"))
        types.append(obj(f"L{i}", *fields))
    return types


# =============================================================================
# Operation Fixtures
# =============================================================================


def directives(
    group: str | None = None,
    order: int | None = None,
    subsection: str | None = None,
    priority: int | None = None,
) -> OperationDirectives:
    """Build documentation directives."""
    return OperationDirectives(
        doc_group=DocGroup(name=group, order=order, subsection=subsection) if group else None,
        doc_priority=DocPriority(level=priority) if priority is not None else None,
    )


@pytest.fixture
def make_operation() -> Callable[..., Operation]:
    """Factory for parsed operations."""

    def _make(
        name: str,
        return_type: str = "String",
        operation_type: OperationType = OperationType.QUERY,
        **kwargs,
    ) -> Operation:
        return Operation(
            name=name,
            operation_type=operation_type,
            return_type=return_type,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_expanded_operation() -> Callable[..., ExpandedOperation]:
    """Factory for expanded operations with optional directive shortcuts."""

    def _make(
        name: str,
        group: str | None = None,
        order: int | None = None,
        subsection: str | None = None,
        priority: int | None = None,
        **kwargs,
    ) -> ExpandedOperation:
        kwargs.setdefault("return_type", ExpandedScalar(name="String"))
        kwargs.setdefault("operation_type", OperationType.QUERY)
        return ExpandedOperation(
            name=name,
            directives=directives(group, order, subsection, priority),
            **kwargs,
        )

    return _make
