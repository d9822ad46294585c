"""
File extension to Prism.js language tag.

Not exhaustive, only the languages the site actually embeds.
"""
from typing import Optional

LANGUAGES = {
    'cs': 'csharp',
    'sql': 'sql',
    'js': 'javascript',
    'ts': 'typescript',
    'sh': 'bash',
    'css': 'css',
    'http': 'http',
    'json': 'json',
    'scss': 'scss',
    'nginx': 'nginx',
    'py': 'python',
    'docker': 'docker',
    'rb': 'ruby',
    'yaml': 'yaml',
}


def lookup_language(ext: Optional[str]) -> str:
    if not ext:
        return ''
    return LANGUAGES.get(ext, ext)
