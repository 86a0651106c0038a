"""Shared constants used across the application."""

import re

# Summary Region Markers
# ----------------------

RELEASE_SUMMARY_HEADER = "###### Release Summary ######"
"""Header marking the start of the autogenerated summary in a release body."""

RELEASE_SUMMARY_FOOTER = "###### End of Release Summary ######"
"""Footer marking the end of the autogenerated summary in a release body."""

PULL_REQUEST_SUMMARY_HEADER = "###### Pull Request Summary ######"
"""Header marking the start of the autogenerated summary in a pull request description."""

PULL_REQUEST_SUMMARY_FOOTER = "###### End of Pull Request Summary ######"
"""Footer marking the end of the autogenerated summary in a pull request description."""

# Generated Release Notes Patterns
# --------------------------------

COMPARE_URL_PATTERN = re.compile(r"\*\*Full Changelog\*\*: https://\S+/compare/(\S*?)\.\.\.(\S+)[ \t\r]*$", re.MULTILINE)
"""Pattern to match the compare link GitHub appends to generated release notes."""

PULL_REQUEST_LINK_PATTERN = re.compile(r"https://\S+/pull/(\d+)$")
"""Pattern to match a pull request link at the end of a changelog line."""

# Release Summary Output
# ----------------------

RELEASE_TOO_BIG_ERROR = "Error: couldn't generate summary. Release too big"
"""Returned instead of a summary when the release prompt exceeds the inference limit."""

PULL_REQUEST_TOO_BIG_ERROR = "Error: couldn't generate summary. Pull request too big"
"""Returned instead of a summary when the pull request prompt exceeds the inference limit."""

RELEASE_SUMMARY_IMAGE_NAME = "release_summary.png"
"""File name used both locally and as the release asset name for the generated image."""

RELEASE_SUMMARY_IMAGE_LABEL = "release summary"
"""Label attached to the uploaded release summary image asset."""

RELEASE_SUMMARY_IMAGE_CONTENT_TYPE = "image/png"

# Inference Defaults
# ------------------

DEFAULT_MAX_AI_QUERY_LENGTH = 30000
"""Default maximum number of characters accepted in a single prompt."""

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

DEFAULT_OPENAI_IMAGE_MODEL = "dall-e-3"
