SYSTEM_PROMPT = "You are a professional resume reviewer. Return only JSON."


USER_TEMPLATE = """
User target role: {role}
Company: {company}

Resume text:
\"\"\"{resume}\"\"\"

Return a single JSON object with keys:
- matchScore: integer 0-100
- strengths: array of strings
- weaknesses: array of strings
- suggestions: array of strings
- tailoredBullets: array of strings
- notes: optional string
Do not add any other keys. Return ONLY valid JSON, with no markdown or commentary.
"""


def build_prompt(role: str, company: str, resume_text: str) -> str:
    """User prompt for one analysis; the resume text is embedded verbatim."""
    return USER_TEMPLATE.format(role=role, company=company or "", resume=resume_text)
