"""Reconcile GitHub authentication and inference configuration."""

from pathlib import Path

from release_summarizer.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    InferenceConfigurationUndefinedError,
)
from release_summarizer.configuration.models import GitHubAuthenticationType

GITHUB_APP_SETTINGS: tuple[tuple[str, str, str], ...] = (
    ("GitHub App ID", "github_app_id", "GITHUB_APP_ID"),
    ("GitHub App private key path", "github_app_private_key_path", "GITHUB_APP_PRIVATE_KEY_PATH"),
    ("GitHub App installation ID", "github_app_installation_id", "GITHUB_APP_INSTALLATION_ID"),
)


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub PAT token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If both PAT and App configurations are defined,
            if the App configuration is incomplete, or if neither is defined.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_values = (github_app_id, github_app_private_key_path, github_app_installation_id)

    if github_pat_token and any(app_values):
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if all(app_values):
        return GitHubAuthenticationType.APP

    if any(app_values):
        missing = [setting for setting, value in zip(GITHUB_APP_SETTINGS, app_values) if not value]
        msg = "Incomplete GitHub App configuration - missing settings include " + ", ".join(
            f"{name} (command line option {cli_name}, environment variable {env_name})" for name, cli_name, env_name in missing
        )
        raise GitHubAuthenticationConfigurationUndefinedError(msg)

    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a PAT or a GitHub App configuration."
    )


async def validate_inference_configuration(openai_api_key: str | None, max_input_length: int) -> None:
    """Validates the inference service configuration.

    Raises:
        InferenceConfigurationUndefinedError: If the API key is missing.
        ValueError: If the maximum input length is not positive.
    """
    if not openai_api_key:
        raise InferenceConfigurationUndefinedError("OpenAI API key", "openai_api_key", "OPENAI_API_KEY")
    if max_input_length <= 0:
        raise ValueError(f"Maximum AI query length must be positive, got {max_input_length}")
