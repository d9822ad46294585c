"""
Markdown rendering for a single gist file.

Content is embedded verbatim: nothing is escaped, so a file containing a
``` fence or a double quote will break out of the block or the hidden field.
"""
from .errors import FormattingError
from .languages import lookup_language

FENCE = '```'


def file_extension(file_name: str) -> str:
    if not file_name or '.' not in file_name:
        return ''
    return file_name.rsplit('.', 1)[1]


def hidden_field(content: str) -> str:
    return f'<input type="hidden" value="{content}" >'


def build_markdown(file_name: str, content: str, add_hidden_field: bool = False) -> str:
    """Wrap content in a fenced code block tagged with the file's language."""
    if not isinstance(file_name, str) or not isinstance(content, str):
        raise FormattingError(
            f"cannot format {type(file_name).__name__} file name "
            f"with {type(content).__name__} content"
        )

    language = lookup_language(file_extension(file_name))
    md_string = f"{FENCE}{language}\n{content}\n{FENCE}"
    if add_hidden_field:
        md_string += '\n' + hidden_field(content)
    return md_string
