# src/a11y_auditor/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the paths the auditor reads and writes.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed 'a11y_auditor' package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def get_report_dir(configured: str = ".") -> Path:
        """
        Resolves the report output directory. Relative paths are taken from the
        current working directory; the directory is created when missing.
        """
        path = Path(configured).expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        path.mkdir(parents=True, exist_ok=True)
        return path
