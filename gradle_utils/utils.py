import os
import pathlib
from typing import Union

# Gradle reads gradle.properties the way java.util.Properties does: as latin-1.
# Reading and writing with the same codec and no newline translation keeps
# every byte of the file intact.
PROPERTIES_ENCODING = "latin-1"

PathLike = Union[str, os.PathLike]


def touch_file(path: PathLike) -> pathlib.Path:
    path = pathlib.Path(path)
    with open(path, "w", encoding=PROPERTIES_ENCODING, newline="") as f:
        f.write("")
    return path


def read_properties_text(path: PathLike) -> str:
    with open(path, "r", encoding=PROPERTIES_ENCODING, newline="") as f:
        return f.read()


def write_properties_text(path: PathLike, content: str):
    """

    :param path: file to overwrite
    :param content: the complete file content

    """
    with open(path, "w", encoding=PROPERTIES_ENCODING, newline="") as f:
        f.write(content)
