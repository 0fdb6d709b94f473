"""Unit tests for the Rafiki prompt builders and the core template filler (no LLM)."""
import pytest

from agents.core.prompt_builder import build_from_template
from api.prompt_builders.rafiki import build_rafiki_suggestions_prompt, build_rafiki_system_prompt


@pytest.mark.unit
class TestBuildFromTemplate:
    def test_fills_placeholders(self):
        assert build_from_template("Grade {grade}: {subject}", grade="8", subject="Science") == "Grade 8: Science"

    def test_missing_and_none_render_empty(self):
        assert build_from_template("[{a}][{b}]", a=None) == "[][]"

    def test_empty_template(self):
        assert build_from_template("", a=1) == ""


@pytest.mark.unit
class TestRafikiSystemPrompt:
    def test_context_is_rendered(self):
        result = build_rafiki_system_prompt(
            subject="Kiswahili",
            grade="8",
            current_topic="Ufahamu",
            user_level="intermediate",
        )
        assert "Grade 8" in result
        assert "Subject: Kiswahili" in result
        assert "Current topic: Ufahamu" in result
        assert "Student level: intermediate" in result

    def test_defaults_when_context_missing(self):
        result = build_rafiki_system_prompt()
        assert "Subject: General" in result
        assert "Current topic: Not specified" in result
        assert "Student level: Beginner" in result


@pytest.mark.unit
class TestRafikiSuggestionsPrompt:
    def test_count_and_question(self):
        result = build_rafiki_suggestions_prompt(user_message="What is a variable?", subject="Mathematics", count=3)
        assert '"What is a variable?"' in result
        assert "suggest 3" in result
        assert '{"suggestions"' in result


@pytest.mark.unit
class TestStrip:
    def test_strip_can_be_disabled(self):
        assert build_from_template("  {x}  ", x="a") == "a"
        assert build_from_template("  {x}  ", strip=False, x="a") == "  a  "
