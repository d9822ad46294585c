"""
Bind the snippet pipeline to a document generator.

The host supplies options once; each shortcode call passes only the gist id
and the file name.
"""
from .snippet import GistSnippet, default_snippet


def make_shortcode(options=None, snippet: GistSnippet = None):
    if options is None:
        options = {}
    if snippet is None:
        snippet = default_snippet()

    async def gist(gist_id: str, file_name: str) -> str:
        return await snippet.produce(gist_id, file_name, options)

    return gist


def register_shortcode(host, options=None, name: str = 'gist', snippet: GistSnippet = None):
    """Register the ``gist`` shortcode on any host exposing add_shortcode(name, fn)."""
    shortcode = make_shortcode(options, snippet)
    host.add_shortcode(name, shortcode)
    return shortcode
