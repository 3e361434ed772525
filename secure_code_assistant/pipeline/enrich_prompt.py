"""Prompt enrichment - Append security guidelines to a code-generation prompt."""


SECURITY_GUIDELINES = """

---

IMPORTANT: Please ensure the generated code follows security best practices. Specifically:
1. Avoid hardcoded secrets; use environment variables.
2. Implement proper authorization checks.
3. Use parameterized queries to prevent SQL injection.
4. Sanitize all user inputs."""


def enrich_prompt(prompt: str) -> str:
    """Return the prompt followed by the security guidelines block."""
    return prompt + SECURITY_GUIDELINES
