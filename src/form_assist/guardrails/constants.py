"""
Constants for guardrails in Form Assist.

This module contains the patterns used by the guardrail system.
"""

# Patterns that might indicate injection attempts in a user request.
# Template syntax ({{ }}, ${ }) is legitimate in form schemas and is not listed.
SUSPICIOUS_PATTERNS = [
    r"<script",
    r"javascript:",
    r"\bon\w+\s*=",
    r"eval\s*\(",
    r"__proto__",
    r"ignore\s+(all\s+)?(previous|prior|above)\s+instructions",
    r"reveal\s+(your\s+)?system\s+prompt",
]

# Pulls the user request out of the prompt built by the form assistant.
# Greedy up to the last closing tag, so a tag inside the request cannot end it early.
USER_REQUEST_PATTERN = r"<request>\n(.*)\n</request>"

# Longest request accepted from a user
MAX_MESSAGE_LENGTH = 1000
