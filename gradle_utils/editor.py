import os
import pathlib
from typing import Optional

from loguru import logger as default_logger

from .properties_file import PropertiesFile
from .utils import PathLike, touch_file

DEFAULTS: dict[str, str] = {
    # 10 seconds -> 6 seconds
    "org.gradle.daemon": "true",
    # to allow dex in process
    "org.gradle.jvmargs": "-Xmx2048m",
    # allow NDK to be used - required by Gradle 1.5 plugin
    "android.useDeprecatedNdk": "true",
    # Android 4.4 (KitKat)
    "cdvMinSdkVersion": "19",
    "cdvCompileSdkVersion": "28",
}


class GradlePropertiesEditor:
    """Loads and edits the ``gradle.properties`` file of an Android platform.

    Nothing touches the disk until the first operation. The file is then
    created if it is missing, read once and kept in memory; ``save()`` writes
    it back.

    Notices go to ``logger``: operational detail at ``debug`` and advice about
    values that differ from the recommended defaults at ``info``. Any object
    with those two methods will do; loguru's logger is used when none is given.
    """

    def __init__(self, platform_dir: PathLike, logger=None):
        self.defaults = dict(DEFAULTS)
        self.gradle_file_path = pathlib.Path(platform_dir) / "gradle.properties"
        self.logger = logger or default_logger.bind(component="gradle-properties")
        self.gradle_file: Optional[PropertiesFile] = None

    def _verbose(self, message: str):
        self.logger.debug(f"[Gradle Properties] {message}")

    def _info(self, message: str):
        self.logger.info(f"[Gradle Properties] {message}")

    def configure(self):
        self._verbose("Preparing Configuration")
        self._configure_defaults()
        self.save()

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None if the property is not set."""
        return self._editor().get(key)

    def set(self, key: str, value, comment: Optional[str] = None):
        """Associate a value with ``key`` in memory.

        If ``value`` is None the key is unset. ``comment`` is written on the
        line above the entry; without one an existing comment is kept. Call
        ``save()`` to write the change to disk.
        """
        self._editor().set(key, value, comment)

    def to_dict(self) -> dict[str, str]:
        return self._editor().to_dict()

    def save(self):
        self._verbose("Updating and Saving File")
        self._editor().save(self.gradle_file_path)

    def _editor(self) -> PropertiesFile:
        if self.gradle_file is None:
            self._initialize_editor()
        return self.gradle_file

    def _initialize_editor(self):
        if not os.path.exists(self.gradle_file_path):
            self._verbose("File missing, creating file with Cordova defaults.")
            touch_file(self.gradle_file_path)

        self.gradle_file = PropertiesFile.load(self.gradle_file_path)

    def _configure_defaults(self):
        gradle_file = self._editor()
        for key, default in self.defaults.items():
            value = gradle_file.get(key)

            if not value:
                self._verbose(f"Appended missing default: {key}={default}")
                gradle_file.set(key, default)
            elif value != default:
                self._info(
                    f'Detected Gradle property "{key}" with the value of "{value}", '
                    f'Cordova\'s recommended value is "{default}"'
                )
