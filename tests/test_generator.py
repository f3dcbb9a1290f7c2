"""End-to-end tests for the documentation generator."""

import json

import pytest

from gqldocs import GenerationResult, Generator, GeneratorConfig
from gqldocs.parser import SchemaLoadError


@pytest.fixture
def config(tmp_path, metadata_dir) -> GeneratorConfig:
    return GeneratorConfig(
        output_dir=str(tmp_path / "docs"),
        metadata_dir=str(metadata_dir),
    )


def _relative(result: GenerationResult) -> list[str]:
    root = result.output_dir.resolve()
    return [p.relative_to(root).as_posix() for p in result.files]


class TestGenerator:
    """Tests for a full generation run against the fixture schema."""

    def test_files_in_display_order(self, config, schema_path):
        """Test sections, subsections and operations land in order."""
        result = Generator(config).generate(str(schema_path))

        assert _relative(result) == [
            "payments/_category_.json",
            "payments/order.mdx",
            "payments/pay.mdx",
            "users/_category_.json",
            "users/create-user.mdx",
            "users/user.mdx",
            "users/legacy-users.mdx",
            "users/search/_category_.json",
            "users/search/users.mdx",
            "uncategorized/_category_.json",
            "uncategorized/health.mdx",
            "sidebars.js",
        ]

    def test_counts(self, config, schema_path):
        """Test the run summary."""
        result = Generator(config).generate(str(schema_path))

        assert result.operations == 7
        assert result.sections == 3
        assert result.types > 0
        assert result.file_count == 12

    def test_schema_from_config(self, config, schema_path):
        """Test the configured schema pointer is used by default."""
        config = config.model_copy(update={"schema_pointer": str(schema_path)})

        assert Generator(config).generate().operations == 7

    def test_section_positions(self, config, schema_path):
        """Test explicit section orders become category positions."""
        result = Generator(config).generate(str(schema_path))
        out = result.output_dir

        assert json.loads((out / "payments" / "_category_.json").read_text())["position"] == 1
        assert json.loads((out / "users" / "_category_.json").read_text())["position"] == 2

    def test_metadata_attached(self, config, schema_path):
        """Test examples and errors reach the operation page."""
        result = Generator(config).generate(str(schema_path))
        page = (result.output_dir / "users" / "user.mdx").read_text(encoding="utf-8")

        assert "### Fetch a user" in page
        assert page.index("UNAUTHENTICATED") < page.index("USER_NOT_FOUND")
        assert "tags: [\"read\", \"user\"]" in page

    def test_wildcard_errors_everywhere(self, config, schema_path):
        """Test wildcard errors reach operations without specific errors."""
        result = Generator(config).generate(str(schema_path))
        page = (result.output_dir / "payments" / "pay.mdx").read_text(encoding="utf-8")

        assert "UNAUTHENTICATED" in page
        assert "USER_NOT_FOUND" not in page

    def test_cycles_rendered_as_links(self, config, schema_path):
        """Test self references in User become cycle links."""
        result = Generator(config).generate(str(schema_path))
        page = (result.output_dir / "users" / "user.mdx").read_text(encoding="utf-8")

        assert '<a href="#user" title="Go to User">↻ User</a>' in page

    def test_exclude_deprecated(self, config, schema_path):
        """Test deprecated operations can be left out."""
        config = config.model_copy(update={"include_deprecated": False})

        result = Generator(config).generate(str(schema_path))

        assert result.operations == 6
        assert "users/legacy-users.mdx" not in _relative(result)

    def test_single_page(self, config, schema_path):
        """Test single-page mode writes one file."""
        config = config.model_copy(update={"single_page": True})

        result = Generator(config).generate(str(schema_path))

        assert _relative(result) == ["index.mdx"]
        content = result.files[0].read_text(encoding="utf-8")
        assert content.index("# order\n") < content.index("# health\n")

    def test_missing_metadata_dir(self, tmp_path, schema_path):
        """Test a run without metadata still succeeds."""
        config = GeneratorConfig(output_dir=str(tmp_path / "docs"), metadata_dir=str(tmp_path / "none"))

        assert Generator(config).generate(str(schema_path)).operations == 7

    def test_missing_schema(self, config, tmp_path):
        """Test an unreadable schema pointer fails the run."""
        with pytest.raises(SchemaLoadError):
            Generator(config).generate(str(tmp_path / "missing.graphql"))

        assert not (tmp_path / "docs").exists()

    def test_non_ascii_group_names(self, tmp_path):
        """Test groups without an ASCII slug get position-based folders."""
        schema = tmp_path / "schema.graphql"
        schema.write_text(
            "type Query {\n"
            '  users: [String] @docGroup(name: "Пользователи")\n'
            '  admins: [String] @docGroup(name: "Admin", subsection: "Поиск")\n'
            "}\n",
            encoding="utf-8",
        )
        config = GeneratorConfig(output_dir=str(tmp_path / "docs"), metadata_dir=str(tmp_path / "none"))

        result = Generator(config).generate(str(schema))

        assert _relative(result) == [
            "admin/_category_.json",
            "admin/subsection-1/_category_.json",
            "admin/subsection-1/admins.mdx",
            "section-2/_category_.json",
            "section-2/users.mdx",
            "sidebars.js",
        ]
        category = json.loads((result.output_dir / "section-2" / "_category_.json").read_text(encoding="utf-8"))
        assert category == {
            "label": "Пользователи",
            "position": 2,
            "collapsible": True,
            "collapsed": True,
            "link": {"type": "generated-index"},
        }
        sidebar = (result.output_dir / "sidebars.js").read_text(encoding="utf-8")
        assert '"id": "admin/subsection-1/admins"' in sidebar
        assert '"id": "section-2/users"' in sidebar


class TestRequestHeaders:
    """Tests for headers sent with URL schemas."""

    def test_configured_headers_win(self, monkeypatch):
        """Test config headers override the environment token."""
        monkeypatch.setenv("GQLDOCS_SCHEMA_TOKEN", "env-token")
        config = GeneratorConfig(headers={"Authorization": "Bearer config", "X-Trace": "1"})

        assert Generator(config).request_headers() == {"Authorization": "Bearer config", "X-Trace": "1"}

    def test_environment_token(self, monkeypatch):
        """Test the environment token is used when nothing is configured."""
        monkeypatch.setenv("GQLDOCS_SCHEMA_TOKEN", "env-token")

        assert Generator().request_headers() == {"Authorization": "Bearer env-token"}
