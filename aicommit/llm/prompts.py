"""Prompt template for commit message generation."""

from aicommit.config import Template

COMMIT_PROMPT_TEMPLATE = """You are a highly skilled Git commit message generator. Analyze the given changes and generate a clear, concise, and conventional commit message.

CONTEXT:
Previous commit messages for this repository:
{history}

CHANGES TO COMMIT:
{diff}

COMMIT TYPES:
{commit_types}

IMPORTANT LANGUAGE INSTRUCTION:
1. First, analyze the language used in previous commits
2. Generate the commit message ENTIRELY in that exact same language
3. Match the writing style and terminology of previous commits precisely

REQUIREMENTS:
1. Format: Must follow conventional commit format:
   <type>: <description>

   <body>
2. Length:
   - Header: Maximum 72 characters
   - Body: Wrap at 72 characters
3. Type:
   - MUST use one of the commit types provided in the list above
   - Do not include any other type
4. Grammar:
   - Use present tense
   - Use imperative mood
   - No period at the end
5. Content:
   - Be specific about what changed
   - Explain why in the body
   - Focus on the change's impact
   - Use consistent terminology
6. Body (Required):
   - Separate from header with blank line
   - Explain motivation for change
   - Contrast with previous behavior
   - Use bullet points for multiple items

EXAMPLES (these are in English but your output should match the language of previous commits):
feat: add user authentication to API endpoints

Implement JWT-based authentication to secure API routes.
- Add token validation middleware
- Restrict access to sensitive endpoints
- Improve overall system security

fix: resolve memory leak in background worker

Worker was not properly clearing temporary files after
processing. Now ensures cleanup happens even when tasks fail.

INSTRUCTIONS:
1. Analyze previous commits to determine the language being used
2. Understand the core changes being made
3. Choose appropriate commit type
4. Write header and body IN THE SAME LANGUAGE as previous commits
5. Verify all requirements are met
6. Return ONLY the complete commit message, nothing else

Generate the commit message now:"""


def format_commit_types(templates: list[Template]) -> str:
    """Render templates as one "prefix: description" line each."""
    return "\n".join(f"{t.prefix}: {t.description}" for t in templates)


def build_prompt(diff: str, history: list[str], templates: list[Template]) -> str:
    """Build the generation prompt.

    Args:
        diff: The staged diff.
        history: Recent commit subjects, used for language and style.
        templates: Allowed commit types.

    Returns:
        The formatted prompt.
    """
    return COMMIT_PROMPT_TEMPLATE.format(
        history="\n".join(history),
        diff=diff,
        commit_types=format_commit_types(templates),
    )
