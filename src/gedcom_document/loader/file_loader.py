import os

from gedcom_document.config import get_config
from gedcom_document.logging import get_logger

from .file_locator import resolve_input_path

log = get_logger(__name__)


def load_file(path: str | os.PathLike, encoding: str | None = None) -> str:
    """
    Read a whole GEDCOM file into memory.

    The default encoding (``utf-8-sig``) drops a leading byte order mark;
    undecodable bytes are replaced rather than aborting the load.
    """
    abs_path = resolve_input_path(path)
    encoding = encoding or get_config().encoding

    with open(abs_path, "r", encoding=encoding, errors="replace", newline="") as f:
        contents = f.read()

    log.info(f"Loaded file: {abs_path} ({len(contents)} chars)")
    return contents
