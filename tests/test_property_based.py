"""Property-based tests for the command file conversions using Hypothesis."""

import toml
from hypothesis import given, settings
from hypothesis import strategies as st

from web_interface_guidelines.cli.install.markdown import (
    split_front_matter,
    to_antigravity_skill,
    to_gemini_toml,
)

# Printable ASCII without line breaks
line_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126),
    max_size=40,
)
body_line = line_text.filter(lambda s: not s.startswith("---"))


class TestFrontMatterProperties:
    """Invariants of front-matter splitting."""

    @given(description=line_text, body=st.lists(body_line, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_description_round_trip(self, description, body):
        """Test the description value is recovered, trimmed."""
        text = "---\ndescription: " + description + "\n---\n" + "\n".join(body)
        parsed = split_front_matter(text)

        assert parsed.fields["description"] == description.strip()
        assert parsed.body == "\n".join(body)

    @given(body=st.lists(body_line, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_no_separators_means_no_front_matter(self, body):
        """Test text without separator lines is all body."""
        text = "\n".join(body)
        parsed = split_front_matter(text)

        assert parsed.fields == {}
        assert parsed.body == text
        assert to_antigravity_skill(text, "skill") == text


class TestGeminiTomlProperties:
    """Invariants of the TOML conversion."""

    @given(description=line_text, body=st.lists(body_line, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_backslashes_and_quotes_escaped(self, description, body):
        """Test every backslash is doubled and every quote escaped in the prompt."""
        text = "---\ndescription: " + description + "\n---\n" + "\n".join(body)
        output = to_gemini_toml(text)
        prompt = output.split('prompt = """\n', 1)[1]

        backslashes = sum(line.count("\\") for line in body)
        quotes = sum(line.count('"') for line in body)
        assert prompt.count("\\") == 2 * backslashes + quotes
        assert prompt.count('"') == quotes + 3
        assert output.splitlines()[0].startswith('description = "')

    @given(
        description=st.text(alphabet="abcxyz ,.:-'", max_size=30),
        body=st.lists(st.text(alphabet="abc XYZ#*`\\-_\"", max_size=30), max_size=5),
    )
    @settings(max_examples=50, deadline=None)
    def test_output_is_valid_toml(self, description, body):
        """Test the output parses and keeps the description and quoted lines."""
        body = [line for line in body if not line.startswith("---") and not line.endswith("\\")]
        text = "---\ndescription: " + description + "\n---\nIntro\n" + "\n".join(body)

        command = toml.loads(to_gemini_toml(text))
        assert command["description"] == description.strip()
        for line in body:
            assert line in command["prompt"]
