"""Plain text listing, for terminals and pipes."""
from render_formats.core import (
    FormatMeta,
    FormatTemplates,
    RenderFormat,
    register_format,
)


register_format(
    RenderFormat(
        meta=FormatMeta(
            id="text",
            name="Plain text",
            description="Module headings underlined with '=', SQL indented by four spaces.",
            media_type="text/plain",
        ),
        templates=FormatTemplates(
            heading="{label}\n{underline}",
            entry="* {title} [{category}]",
            comment="{comment}",
            code="{code}",
            separator="\n\n",
        ),
        comment_prefix="  ",
        code_prefix="    ",
        underline_char="=",
    )
)
