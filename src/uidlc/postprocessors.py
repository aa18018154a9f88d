"""
Reference post-processors.

A post-processor maps the linked text outputs of one component, keyed by
file type, to new outputs. Generators apply them in registration order.
"""

from __future__ import annotations

from .core.ir import FileType


def normalize_whitespace(outputs: dict[str, str]) -> dict[str, str]:
    """
    Strip trailing whitespace from every line and end each output with one newline.

    Examples:
        >>> normalize_whitespace({"js": "a  \\nb\\n\\n\\n"})
        {'js': 'a\\nb\\n'}
    """
    normalized = {}
    for file_type, text in outputs.items():
        lines = [line.rstrip() for line in text.splitlines()]
        normalized[file_type] = "\n".join(lines).rstrip("\n") + "\n"
    return normalized


def create_single_file_component(outputs: dict[str, str]) -> dict[str, str]:
    """
    Combine template, script and style outputs into a single ``vue`` output.

    Outputs of other file types pass through unchanged. Without a template
    the outputs are returned as they are.
    """
    template = outputs.get(FileType.HTML.value)
    if template is None:
        return outputs

    script = outputs.get(FileType.JS.value)
    style = outputs.get(FileType.CSS.value)

    sections = [f"<template>\n{template}\n</template>"]
    if script:
        sections.append(f"<script>\n{script}\n</script>")
    if style:
        sections.append(f"<style scoped>\n{style}\n</style>")

    combined = {
        key: value
        for key, value in outputs.items()
        if key not in (FileType.HTML.value, FileType.JS.value, FileType.CSS.value)
    }
    combined[FileType.VUE.value] = "\n\n".join(sections)
    return combined
