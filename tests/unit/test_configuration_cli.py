"""Unit tests for the command line interface."""

from typing import Any
from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

from release_summarizer.configuration import cli
from release_summarizer.configuration.models import GitHubAuthenticationType
from release_summarizer.summarize.models import PullRequestSummaryOptions
from release_summarizer.utils.constants import RELEASE_TOO_BIG_ERROR

runner = CliRunner()

CLEAN_ENV: dict[str, str | None] = {
    "GITHUB_PAT_TOKEN": None,
    "GITHUB_APP_ID": None,
    "GITHUB_APP_PRIVATE_KEY_PATH": None,
    "GITHUB_APP_INSTALLATION_ID": None,
    "OPENAI_API_KEY": None,
    "UPDATE_RELEASE": None,
    "GENERATE_IMAGE": None,
    "IGNORED_FILES": None,
    "SRC_FILES": None,
    "CREATE_FILE_COMMENTS": None,
    "OUTPUT_AS_COMMENT": None,
    "REPLACE_GENERATED_NOTES": None,
}

CREDENTIALS = ["--github-pat-token", "token", "--openai-api-key", "sk-test"]


def invoke(*args: str) -> Any:
    """Invoke the CLI with a clean environment."""
    return runner.invoke(cli.typer_app, list(args), env=CLEAN_ENV)


def test_missing_github_authentication_exits() -> None:
    """Test that the command fails before any work without GitHub credentials."""
    result = invoke("repo", "--openai-api-key", "sk-test", "owner/repo", "summarize-release", "v1.1")
    assert result.exit_code == 1
    assert "No GitHub authentication configuration provided" in result.output


def test_missing_openai_key_exits() -> None:
    """Test that the command fails before any work without an inference key."""
    result = invoke("repo", "--github-pat-token", "token", "--openai-api-key", "", "owner/repo", "summarize-release", "v1.1")
    assert result.exit_code == 1
    assert "OPENAI_API_KEY" in result.output


def test_summarize_release_passes_options(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that release options and credentials reach the workflow."""
    workflow = AsyncMock(return_value="* summary")
    monkeypatch.setattr(cli, "run_summarize_release_workflow", workflow)

    result = invoke(
        "repo",
        *CREDENTIALS,
        "--max-ai-query-length",
        "5000",
        "owner/repo",
        "summarize-release",
        "v1.1",
        "--update-release",
        "--generate-image",
        "--ignored-files",
        "*.md",
        "--output-as-comment",
    )

    assert result.exit_code == 0, result.output
    assert "* summary" in result.output
    kwargs = workflow.await_args.kwargs
    assert kwargs["repo"] == "owner/repo"
    assert kwargs["tag_name"] == "v1.1"
    assert kwargs["github_auth_type"] == GitHubAuthenticationType.PAT
    assert kwargs["openai_api_key"] == "sk-test"
    assert kwargs["max_ai_query_length"] == 5000
    options = kwargs["options"]
    assert options.update_release is True
    assert options.generate_image is True
    assert options.replace_generated_notes is False
    assert options.pull_requests == PullRequestSummaryOptions(ignored_files="*.md", output_as_comment=True)


def test_summarize_release_error_sentinel_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that an oversized release is reported with a failing exit code."""
    monkeypatch.setattr(cli, "run_summarize_release_workflow", AsyncMock(return_value=RELEASE_TOO_BIG_ERROR))

    result = invoke("repo", *CREDENTIALS, "owner/repo", "summarize-release", "v1.1")

    assert result.exit_code == 1
    assert RELEASE_TOO_BIG_ERROR in result.output


def test_summarize_pull_request(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the pull request command passes its number and options."""
    workflow = AsyncMock(return_value="* pr summary")
    monkeypatch.setattr(cli, "run_summarize_pull_request_workflow", workflow)

    result = invoke("repo", *CREDENTIALS, "owner/repo", "summarize-pr", "12", "--src-files", "src/*", "--create-file-comments")

    assert result.exit_code == 0, result.output
    assert "* pr summary" in result.output
    kwargs = workflow.await_args.kwargs
    assert kwargs["pull_request_number"] == 12
    assert kwargs["options"] == PullRequestSummaryOptions(src_files="src/*", create_file_comments=True)


def test_repo_options_precede_repository(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that connection options given before the repository reach the pull request workflow."""
    workflow = AsyncMock(return_value="* pr summary")
    monkeypatch.setattr(cli, "run_summarize_pull_request_workflow", workflow)

    result = invoke(
        "repo",
        *CREDENTIALS,
        "--github-api-url",
        "https://ghe.example.com/api/v3",
        "--openai-model",
        "gpt-test",
        "owner/repo",
        "summarize-pr",
        "12",
    )

    assert result.exit_code == 0, result.output
    kwargs = workflow.await_args.kwargs
    assert kwargs["repo"] == "owner/repo"
    assert kwargs["github_api_url"] == "https://ghe.example.com/api/v3"
    assert kwargs["openai_model"] == "gpt-test"


def test_repo_options_after_repository_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that group options placed after the repository are a usage error."""
    workflow = AsyncMock(return_value="* summary")
    monkeypatch.setattr(cli, "run_summarize_release_workflow", workflow)

    result = invoke("repo", "owner/repo", *CREDENTIALS, "summarize-release", "v1.1")

    assert result.exit_code == 2
    workflow.assert_not_awaited()
