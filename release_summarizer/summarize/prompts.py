"""Prompt assembly for release, pull request and image generation."""

from release_summarizer.utils.templates import construct_jinja2_template_from_string, render_template_with_model

from .models import (
    FileSummaryPromptContext,
    ImageDescriptionPromptContext,
    PullRequestPromptContext,
    ReleasePromptContext,
)

RELEASE_PROMPT_TEMPLATE = r"""You are an expert writer, and you are trying to prepare the release notes.
You went over every Pull Request and Commit that is part of the release.
For some of these, there was an error in the Pull Request summary, or in the Commit summary.
Take into account that the Pull Requests summaries are written by an AI model.
Please summarize the release. Write your response in bullet points, starting each bullet point with a `*`.
Use the summary from the previous release as a starting point for the release notes.
Do not repeat the Pull Request summaries or the Commit summaries.
Do not repeat the previous release notes.
Do not repeat any bullet point more than once.
Your public is the marketing team and the users of the project, and they are not programmers.
Ensure that the release notes are easy to understand and they are written in a way that is appealing to the public.
Write it in the style of {{ persona }}.


THE PR SUMMARIES:
```
{{ pull_request_summaries | join("\n") }}
```

{{ previous_summary }}

Reminder - write only the most important points. No more than a few bullet points.
THE RELEASE SUMMARY:
"""

IMAGE_DESCRIPTION_PROMPT_TEMPLATE = """You are an expert AI, and you are trying to prepare a query to generate an image from the release notes.
Take into account that the Release notes are written by an AI model.
Please create a brief prompt to generate an image by an AI model.
The prompt should be in the style of:
"An AI model is trying to generate an image from the release notes of a repository. The release notes are written by an AI model."
The prompt should not be longer than 500 characters.
The prompt should be in one phrase.
Ensure that the prompt reflects an image description, and not a text description, of the release notes.
Ensure that the prompt focuses on the most important points of the release notes.
Ensure that the prompt doesn't have technical details, and is easy to understand.
Ensure that the prompt is based around the figure of the program the repository is about, and how it has improved with the last release.
Ensure that the prompt describes a scene that is easy to imagine and drawable.
The prompt needs to be focused around the personality {{ persona }} using the released software.

THE RELEASE NOTES:
"""

FILE_SUMMARY_PROMPT_TEMPLATE = """You are an expert programmer, and you are trying to summarize a git diff.
Reminders about the git diff format:
For every file, there are a few metadata lines. Then a line starting with `@@` marks each changed hunk.
A line starting with `+` means it was added.
A line starting with `-` means that line was deleted.
A line that starts with neither `+` nor `-` is code given for context and better understanding.
It is not part of the diff.
Write your response in bullet points, starting each bullet point with a `*`.
Do not include the file name in the summary.
Do not write more than a few bullet points.

THE FILE: {{ filename }}
THE GIT DIFF TO BE SUMMARIZED:
```
{{ patch }}
```

THE SUMMARY:
"""

PULL_REQUEST_PROMPT_TEMPLATE = r"""You are an expert programmer, and you are trying to summarize a pull request.
You went over every file that was changed in it.
For some of these files changes were too big and were omitted in the files diff summary.
Please summarize the pull request. Write your response in bullet points, starting each bullet point with a `*`.
Write a high level description. Do not repeat the file summaries or the file names.
Write the most important bullet points. The list should not be long.

THE PULL REQUEST TITLE: {{ title }}

THE FILE SUMMARIES:
```
{{ file_summaries | join("\n\n") }}
```

Reminder - write only the most important points. No more than a few bullet points.
THE PULL REQUEST SUMMARY:
"""

IMAGE_DESCRIPTION_PROMPT_SUFFIX = "\n\nTHE IMAGE QUERY:\n"


def build_release_prompt(pull_request_summaries: list[str], previous_summary: str, persona: str) -> str:
    """Assemble the prompt asking for a brief bullet-point release summary."""
    context = ReleasePromptContext(persona=persona, pull_request_summaries=pull_request_summaries, previous_summary=previous_summary)
    return render_template_with_model(context, construct_jinja2_template_from_string(RELEASE_PROMPT_TEMPLATE))


def build_image_description_prompt(summary: str, persona: str) -> tuple[str, str, str]:
    """Assemble the segments asking for a drawable scene describing ``summary``."""
    context = ImageDescriptionPromptContext(persona=persona)
    instruction = render_template_with_model(context, construct_jinja2_template_from_string(IMAGE_DESCRIPTION_PROMPT_TEMPLATE))
    return instruction, summary, IMAGE_DESCRIPTION_PROMPT_SUFFIX


def build_image_generation_prompt(description: str, persona: str) -> str:
    """Assemble the prompt sent to the image generation service."""
    return f"{description}. No text. Style of {persona}"


def build_file_summary_prompt(filename: str, patch: str) -> str:
    """Assemble the prompt summarizing the diff of a single file."""
    context = FileSummaryPromptContext(filename=filename, patch=patch)
    return render_template_with_model(context, construct_jinja2_template_from_string(FILE_SUMMARY_PROMPT_TEMPLATE))


def build_pull_request_prompt(title: str, file_summaries: list[str]) -> str:
    """Assemble the prompt summarizing a pull request from its file summaries."""
    context = PullRequestPromptContext(title=title, file_summaries=file_summaries)
    return render_template_with_model(context, construct_jinja2_template_from_string(PULL_REQUEST_PROMPT_TEMPLATE))
