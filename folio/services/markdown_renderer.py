import logging
import re
from typing import List

import markdown
from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "toc"]
EXTENSION_CONFIGS = {
    "codehilite": {"css_class": "codehilite", "guess_lang": False},
    "toc": {"permalink": False},
}

# ```ts:src/tracing.ts  or  ```ts title="src/tracing.ts"
FENCE_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})[ \t]*"
    r"(?P<lang>[\w+#.-]*)"
    r"(?::(?P<path>\S+)|[ \t]+title=\"(?P<title>[^\"]+)\")?[ \t]*$"
)


def render_markdown(body: str) -> Markup:
    """Convert a post body to HTML."""
    source = extract_code_filenames(body)
    html = markdown.markdown(
        source,
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=EXTENSION_CONFIGS,
        output_format="html",
    )
    return Markup(html)


def extract_code_filenames(body: str) -> str:
    """Move filename hints off fence lines into a caption placed before the block."""
    lines: List[str] = []
    open_fence = None

    for line in body.splitlines():
        match = FENCE_PATTERN.match(line)
        if not match:
            lines.append(line)
            continue

        fence = match.group("fence")
        if open_fence:
            # Only a bare fence of the same kind and at least the same length closes
            if (
                fence[0] == open_fence[0]
                and len(fence) >= len(open_fence)
                and not match.group("lang")
            ):
                open_fence = None
            lines.append(line)
            continue

        open_fence = fence
        filename = match.group("path") or match.group("title")
        if not filename:
            lines.append(line)
            continue

        logger.debug(f"Code block caption: {filename}")
        indent = match.group("indent")
        lines += [
            "",
            f'<div class="code-filename">{escape(filename)}</div>',
            "",
            f"{indent}{fence}{match.group('lang')}",
        ]

    return "\n".join(lines)
