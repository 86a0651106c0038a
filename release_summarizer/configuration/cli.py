"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from release_summarizer.configuration.env import settings
from release_summarizer.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    InferenceConfigurationUndefinedError,
)
from release_summarizer.configuration.reconcile import (
    validate_github_authentication_configuration,
    validate_inference_configuration,
)
from release_summarizer.summarize.driver import run_summarize_pull_request_workflow, run_summarize_release_workflow
from release_summarizer.summarize.models import PullRequestSummaryOptions, ReleaseSummaryOptions
from release_summarizer.utils.constants import RELEASE_SUMMARY_IMAGE_NAME
from release_summarizer.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)

repo_app = typer.Typer(help="Repository-related commands")


def repo_callback(
    ctx: typer.Context,
    repo: Annotated[str, Argument(envvar="REPO", help="Repository name (owner/repo).")],
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")] = None,
    openai_api_key: Annotated[str | None, Option(envvar="OPENAI_API_KEY", help="OpenAI API key.")] = settings.OPENAI_API_KEY,
    openai_base_url: Annotated[str | None, Option(envvar="OPENAI_BASE_URL", help="OpenAI-compatible API base URL.")] = settings.OPENAI_BASE_URL,
    openai_model: Annotated[str, Option(envvar="OPENAI_MODEL", help="Model used for text summaries.")] = settings.OPENAI_MODEL,
    openai_image_model: Annotated[str, Option(envvar="OPENAI_IMAGE_MODEL", help="Model used for image generation.")] = settings.OPENAI_IMAGE_MODEL,
    max_ai_query_length: Annotated[
        int, Option(envvar="MAX_AI_QUERY_LENGTH", help="Maximum number of characters sent in a single prompt.")
    ] = settings.MAX_AI_QUERY_LENGTH,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = settings.DEBUG,
) -> None:
    """Set the repository and credentials for the current context."""
    configure_logging(debug)
    try:
        github_auth_type = asyncio.run(
            validate_github_authentication_configuration(
                github_pat_token=github_pat_token,
                github_app_id=github_app_id,
                github_app_private_key_path=github_app_private_key_path,
                github_app_installation_id=github_app_installation_id,
            )
        )
        asyncio.run(validate_inference_configuration(openai_api_key=openai_api_key, max_input_length=max_ai_query_length))
    except (GitHubAuthenticationConfigurationUndefinedError, InferenceConfigurationUndefinedError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo
    ctx.obj["github_api_url"] = github_api_url
    ctx.obj["github_pat_token"] = github_pat_token
    ctx.obj["github_app_id"] = github_app_id
    ctx.obj["github_app_private_key_path"] = github_app_private_key_path
    ctx.obj["github_app_installation_id"] = github_app_installation_id
    ctx.obj["github_auth_type"] = github_auth_type
    ctx.obj["openai_api_key"] = openai_api_key
    ctx.obj["openai_base_url"] = openai_base_url
    ctx.obj["openai_model"] = openai_model
    ctx.obj["openai_image_model"] = openai_image_model
    ctx.obj["max_ai_query_length"] = max_ai_query_length


repo_app.callback()(repo_callback)


@repo_app.command(name="summarize-release")
def summarize_release_cli(
    ctx: typer.Context,
    tag_name: Annotated[str, Argument(help="Tag of the release to summarize.")],
    update_release: Annotated[bool, Option(envvar="UPDATE_RELEASE", help="Write the summary back to the release body.")] = False,
    generate_image: Annotated[bool, Option(envvar="GENERATE_IMAGE", help="Generate an image illustrating the summary.")] = False,
    ignored_files: Annotated[str, Option(envvar="IGNORED_FILES", help="Comma-separated globs of files left out of PR summaries.")] = "",
    src_files: Annotated[str, Option(envvar="SRC_FILES", help="Comma-separated globs of files included in PR summaries.")] = "",
    create_file_comments: Annotated[
        bool, Option(envvar="CREATE_FILE_COMMENTS", help="Comment each file summary on pull requests being summarized.")
    ] = False,
    output_as_comment: Annotated[
        bool, Option(envvar="OUTPUT_AS_COMMENT", help="Post generated PR summaries as comments instead of editing descriptions.")
    ] = False,
    replace_generated_notes: Annotated[
        bool, Option(envvar="REPLACE_GENERATED_NOTES", help="Regenerate the summary even if the release already has one.")
    ] = False,
    image_path: Annotated[Path, Option(envvar="IMAGE_PATH", help="Where to save the generated image.")] = Path(RELEASE_SUMMARY_IMAGE_NAME),
) -> None:
    """Summarizes a release from the summaries of its pull requests."""
    options = ReleaseSummaryOptions(
        update_release=update_release,
        generate_image=generate_image,
        replace_generated_notes=replace_generated_notes,
        pull_requests=PullRequestSummaryOptions(
            ignored_files=ignored_files,
            src_files=src_files,
            create_file_comments=create_file_comments,
            output_as_comment=output_as_comment,
        ),
    )
    summary = asyncio.run(
        run_summarize_release_workflow(
            repo=ctx.obj["repo"],
            tag_name=tag_name,
            github_auth_type=ctx.obj["github_auth_type"],
            github_pat_token=ctx.obj["github_pat_token"],
            github_app_id=ctx.obj["github_app_id"],
            github_app_private_key_path=ctx.obj["github_app_private_key_path"],
            github_app_installation_id=ctx.obj["github_app_installation_id"],
            github_api_url=ctx.obj["github_api_url"],
            openai_api_key=ctx.obj["openai_api_key"],
            openai_base_url=ctx.obj["openai_base_url"],
            openai_model=ctx.obj["openai_model"],
            openai_image_model=ctx.obj["openai_image_model"],
            max_ai_query_length=ctx.obj["max_ai_query_length"],
            options=options,
            image_path=image_path,
        )
    )
    typer.echo(summary)
    if summary.startswith("Error:"):
        sys.exit(1)


@repo_app.command(name="summarize-pr")
def summarize_pull_request_cli(
    ctx: typer.Context,
    pull_request_number: Annotated[int, Argument(help="Number of the pull request to summarize.")],
    ignored_files: Annotated[str, Option(envvar="IGNORED_FILES", help="Comma-separated globs of files left out of the summary.")] = "",
    src_files: Annotated[str, Option(envvar="SRC_FILES", help="Comma-separated globs of files included in the summary.")] = "",
    create_file_comments: Annotated[bool, Option(envvar="CREATE_FILE_COMMENTS", help="Comment each file summary on the pull request.")] = False,
    output_as_comment: Annotated[
        bool, Option(envvar="OUTPUT_AS_COMMENT", help="Post the summary as a comment instead of editing the description.")
    ] = False,
) -> None:
    """Summarizes a pull request, reusing the summary already stored in its description."""
    options = PullRequestSummaryOptions(
        ignored_files=ignored_files,
        src_files=src_files,
        create_file_comments=create_file_comments,
        output_as_comment=output_as_comment,
    )
    summary = asyncio.run(
        run_summarize_pull_request_workflow(
            repo=ctx.obj["repo"],
            pull_request_number=pull_request_number,
            github_auth_type=ctx.obj["github_auth_type"],
            github_pat_token=ctx.obj["github_pat_token"],
            github_app_id=ctx.obj["github_app_id"],
            github_app_private_key_path=ctx.obj["github_app_private_key_path"],
            github_app_installation_id=ctx.obj["github_app_installation_id"],
            github_api_url=ctx.obj["github_api_url"],
            openai_api_key=ctx.obj["openai_api_key"],
            openai_base_url=ctx.obj["openai_base_url"],
            openai_model=ctx.obj["openai_model"],
            max_ai_query_length=ctx.obj["max_ai_query_length"],
            options=options,
        )
    )
    typer.echo(summary)
    if summary.startswith("Error:"):
        sys.exit(1)


# --- Register the repo_app as a sub-app of the main Typer app ---
typer_app.add_typer(repo_app, name="repo")


if __name__ == "__main__":
    typer_app()
