"""Markdown listing: one section per module, fenced ```sql blocks."""
from render_formats.core import (
    FormatMeta,
    FormatTemplates,
    RenderFormat,
    register_format,
)


register_format(
    RenderFormat(
        meta=FormatMeta(
            id="markdown",
            name="Markdown",
            description="`##` per module, `###` per example, comments as blockquotes.",
            media_type="text/markdown",
        ),
        templates=FormatTemplates(
            heading="## {label}",
            entry="### {title}\n\n_Category: `{category}`_\n",
            comment="{comment}\n",
            code="```sql\n{code}\n```",
            separator="\n\n",
        ),
        comment_prefix="> ",
    )
)
