from __future__ import annotations

HELLO_PROMPT = "Say 'Hello, World!'"

_ANALYSIS_TEMPLATE = """Analyze the following text and extract the key research discourse, literature references, and academic insights. Format the response in a clear, structured way:

{text}

Please provide:
1. Main research themes
2. Key literature references
3. Academic insights and implications
4. Potential research gaps or areas for further study"""


def build_analysis_prompt(text: str) -> str:
    return _ANALYSIS_TEMPLATE.format(text=text)


def preview(text: str, limit: int = 100) -> str:
    return text[:limit] + "..."
