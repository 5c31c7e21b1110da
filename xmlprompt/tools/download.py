"""Save the generated document as a downloadable XML file."""

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

XML_MIME_TYPE = "application/xml"
DEFAULT_FILENAME = "prompt.xml"


def offer_download(
    text: str,
    filename: str = DEFAULT_FILENAME,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Write the document to disk exactly as given.

    The file is UTF-8 and no newline translation is applied, so the bytes
    on disk match what was previewed or copied.

    Args:
        text: XML document
        filename: Target file name (default: prompt.xml)
        directory: Target directory (default: current working directory)

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    target_dir = Path(directory) if directory is not None else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / filename

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)

    logger.info("Saved %s (%s, %d chars)", path, XML_MIME_TYPE, len(text))
    return path
