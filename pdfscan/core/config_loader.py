"""
Configuration loader for pdfscan.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
When no configuration file can be found, built-in defaults are used.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import ConfigurationError


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Optional[Path]


@dataclass
class ExtractionConfig:
    """Configuration for PDF extraction settings."""
    primary_backend: str
    fallback_backend: str
    max_file_size_mb: int
    supported_extensions: List[str]


@dataclass
class AnalysisConfig:
    """Configuration for keyword analysis runs."""
    threshold: float
    workers: Optional[int]
    log_progress_every: int
    keyword_weights: Dict[str, float]


@dataclass
class SearchConfig:
    """Configuration for phrase search."""
    case_sensitive: bool
    context_chars: int
    max_snippets: int


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    extraction: ExtractionConfig
    analysis: AnalysisConfig
    search: SearchConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.resolve().parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls) -> "Config":
        """Build a Config from built-in defaults, without file logging."""
        config = cls._parse_config({}, Path.cwd())
        config.paths.logs_directory = None
        return config

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        logs_directory = paths_data.get("logs_directory", "output/logs")
        paths = PathsConfig(
            logs_directory=cls._resolve_path(logs_directory, project_root) if logs_directory else None
        )

        ext_data = data.get("extraction", {})
        extraction = ExtractionConfig(
            primary_backend=ext_data.get("primary_backend", "pypdf"),
            fallback_backend=ext_data.get("fallback_backend", "pdfplumber"),
            max_file_size_mb=ext_data.get("max_file_size_mb", 500),
            supported_extensions=ext_data.get("supported_extensions", [".pdf"])
        )

        analysis_data = data.get("analysis", {})
        threshold = analysis_data.get("threshold", 0.1)
        if not isinstance(threshold, (int, float)) or not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(
                f"analysis.threshold must be a number between 0 and 1, got {threshold!r}"
            )
        workers = analysis_data.get("workers")
        if workers is not None and (not isinstance(workers, int) or workers < 1):
            raise ConfigurationError(
                f"analysis.workers must be a positive integer or null, got {workers!r}"
            )
        analysis = AnalysisConfig(
            threshold=float(threshold),
            workers=workers,
            log_progress_every=analysis_data.get("log_progress_every", 100),
            keyword_weights={
                str(k).strip().lower(): float(v)
                for k, v in analysis_data.get("keyword_weights", {}).items()
            }
        )

        search_data = data.get("search", {})
        search = SearchConfig(
            case_sensitive=search_data.get("case_sensitive", False),
            context_chars=search_data.get("context_chars", 40),
            max_snippets=search_data.get("max_snippets", 3)
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            extraction=extraction,
            analysis=analysis,
            search=search,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory and falls
                    back to built-in defaults.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If an existing config file cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()

        if config_path is None:
            _config_instance = Config.defaults()
        else:
            _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Optional[Path]:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Primary backend: {config.extraction.primary_backend}")
        print(f"Threshold: {config.analysis.threshold}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
