"""
Output file helper shared by the writers.
"""

import os
from pathlib import Path


def write_text_file(output_path: Path, text: str):
    """
    Write text to output_path through a temporary sibling file.

    The destination only appears once the whole text is on disk; a failed
    write leaves no partial file behind.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(output_path.name + '.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        os.replace(tmp_path, output_path)
    except OSError:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
