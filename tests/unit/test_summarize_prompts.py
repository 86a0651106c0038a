"""Unit tests for prompt assembly."""

from release_summarizer.summarize.prompts import (
    build_file_summary_prompt,
    build_image_description_prompt,
    build_image_generation_prompt,
    build_pull_request_prompt,
    build_release_prompt,
)


def test_build_release_prompt_layout() -> None:
    """Test that summaries are fenced and the previous summary follows them."""
    prompt = build_release_prompt(
        ["Summary for PR #1:\nTitle: one\n* a", "Summary for PR #2:\nTitle: two\n* b"],
        "THE PREVIOUS SUMMARY: \n```\n* old\n```\n",
        "Yoda",
    )
    assert prompt.startswith("You are an expert writer, and you are trying to prepare the release notes.\n")
    assert "Write it in the style of Yoda.\n" in prompt
    assert "THE PR SUMMARIES:\n```\nSummary for PR #1:\nTitle: one\n* a\nSummary for PR #2:\nTitle: two\n* b\n```\n" in prompt
    assert prompt.index("THE PR SUMMARIES:") < prompt.index("THE PREVIOUS SUMMARY:") < prompt.index("Reminder - write only")
    assert prompt.endswith("Reminder - write only the most important points. No more than a few bullet points.\nTHE RELEASE SUMMARY:\n")


def test_build_release_prompt_without_previous_summary() -> None:
    """Test that an empty previous summary leaves no previous context."""
    prompt = build_release_prompt([], "", "Darth Vader")
    assert "THE PREVIOUS SUMMARY" not in prompt
    assert "THE PR SUMMARIES:\n```\n\n```\n" in prompt


def test_build_release_prompt_does_not_render_summary_content() -> None:
    """Test that template syntax inside summaries is kept as plain text."""
    prompt = build_release_prompt(["* uses {{ braces }} and {% tags %}"], "", "Yoda")
    assert "* uses {{ braces }} and {% tags %}" in prompt


def test_build_image_description_prompt_segments() -> None:
    """Test the three segments sent for the image description."""
    instruction, summary, suffix = build_image_description_prompt("* a summary", "A known celebrity")
    assert "The prompt needs to be focused around the personality A known celebrity using the released software." in instruction
    assert instruction.endswith("\n\nTHE RELEASE NOTES:\n")
    assert summary == "* a summary"
    assert suffix == "\n\nTHE IMAGE QUERY:\n"


def test_build_image_generation_prompt() -> None:
    """Test the image generation prompt carries the no-text instruction and style."""
    assert build_image_generation_prompt("A robot waving", "Yoda") == "A robot waving. No text. Style of Yoda"


def test_build_file_summary_prompt() -> None:
    """Test that the file name and patch are embedded."""
    prompt = build_file_summary_prompt("src/app.py", "@@ -1 +1 @@\n-old\n+new")
    assert "THE FILE: src/app.py\n" in prompt
    assert "```\n@@ -1 +1 @@\n-old\n+new\n```" in prompt


def test_build_pull_request_prompt() -> None:
    """Test that file summaries are separated by blank lines."""
    prompt = build_pull_request_prompt("Add login", ["a.py:\n* one", "b.py:\n* two"])
    assert "THE PULL REQUEST TITLE: Add login\n" in prompt
    assert "```\na.py:\n* one\n\nb.py:\n* two\n```" in prompt
    assert prompt.endswith("THE PULL REQUEST SUMMARY:\n")
