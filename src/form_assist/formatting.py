"""
Markdown rendering for assistant responses.
"""


def format_markdown_response(
    explanation: str,
    complexity: int,
    warnings: list[str] | None = None,
    tool_usage: list[str] | None = None,
) -> str:
    """
    Render the explanation shown to the user next to the schema preview.

    Args:
        explanation: The assistant's explanation, included verbatim.
        complexity: Complexity of the candidate schema.
        warnings: Optional warnings; the section is omitted when empty.
        tool_usage: Optional self-check summaries; omitted when empty.

    Returns:
        Markdown string.
    """
    sections = [
        "## AI Form Assistant",
        explanation,
        "### Changes Made:\n"
        "- Updated form structure based on your request\n"
        f"- Current complexity: {complexity} components",
    ]

    if warnings:
        sections.append(
            "### ⚠️ Warnings:\n" + "\n".join(f"- {warning}" for warning in warnings)
        )

    if tool_usage:
        sections.append(
            "### Tool Usage:\n" + "\n".join(f"- {usage}" for usage in tool_usage)
        )

    sections.append(
        "### Next Steps:\n"
        "- Review the changes in the preview\n"
        '- Click "Accept" to apply changes or "Reject" to revert\n'
        "- The form will auto-save once you accept the changes"
    )

    return "\n\n".join(sections)
