"""JSON extraction and repair for AI-generated content"""

import re

_FENCED_JSON_RE = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)
_FENCED_ANY_RE = re.compile(r"```([\s\S]*?)```")


def extract_json_from_content(content: str) -> str:
    """
    Pull the JSON payload out of a model response.

    Prefers a ```json fenced block, then any fenced block, then the raw text.
    """
    json_string = content.strip()

    match = _FENCED_JSON_RE.search(content) or _FENCED_ANY_RE.search(content)
    if match:
        json_string = match.group(1).strip()

    if json_string.startswith("```json"):
        json_string = json_string[7:]
    if json_string.endswith("```"):
        json_string = json_string[:-3]
    return json_string.strip()


def repair_json(json_string: str) -> str:
    """
    Best-effort fix of the usual defects in model-written JSON.

    Handles truncated tails, missing commas between values and objects,
    trailing commas, unquoted keys and unbalanced closing braces/brackets.
    The result is not guaranteed to parse.
    """
    repaired = json_string

    # Drop a dangling, unfinished object/array after the last complete one
    last_complete = max(repaired.rfind("}"), repaired.rfind("]"))
    if last_complete > 0:
        truncate_at = last_complete + 1
        dangling = re.search(r"[{\[]", repaired[truncate_at:])
        if dangling:
            truncate_at += dangling.start()
        repaired = repaired[:truncate_at]

    # "a": "x" "b": "y"  ->  "a": "x", "b": "y"
    repaired = re.sub(r'"([^"]+)"\s+"([^"]+)"', r'"\1", "\2"', repaired)
    # } {  ->  }, {
    repaired = re.sub(r"\}\s*\{", "}, {", repaired)
    # unquoted keys
    repaired = re.sub(r"([{,]\s*)([a-zA-Z_][a-zA-Z0-9_]*)\s*:", r'\1"\2":', repaired)

    # Close whatever the truncation left open; arrays first, as in {"features": [{...}
    repaired += "]" * max(repaired.count("[") - repaired.count("]"), 0)
    repaired += "}" * max(repaired.count("{") - repaired.count("}"), 0)

    # Trailing commas, including any the truncation left before the closers
    repaired = re.sub(r",(\s*[}\]])", r"\1", repaired)

    return repaired
