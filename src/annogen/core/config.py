"""Settings loading and saving for annogen"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import ValidationError

from annogen.errors import ConfigInvalidError, ConfigNotFoundError
from annogen.models.settings import FiletypeSettings, Settings
from annogen.models.template import TemplateConfig

logger = logging.getLogger(__name__)


# Settings live in .annogen/config.yaml in current working directory
CONFIG_DIR = Path(".annogen")
CONFIG_FILE = CONFIG_DIR / "config.yaml"


def get_config_path() -> Path:
    """Get the settings file path (relative to cwd)"""
    return CONFIG_FILE


def settings_exist(path: Optional[Path] = None) -> bool:
    """Check if the settings file exists"""
    return (path or CONFIG_FILE).exists()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from .annogen/config.yaml (or ``path``)

    Raises:
        ConfigNotFoundError: If the settings file doesn't exist
        ConfigInvalidError: If the settings file is invalid
    """
    path = path or CONFIG_FILE
    if not path.exists():
        raise ConfigNotFoundError(
            f"Config file not found at {path}\n"
            f"Run 'annogen init' to create one."
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            raise ConfigInvalidError(f"Config file is empty: {path}")

        return Settings.model_validate(data)

    except yaml.YAMLError as e:
        raise ConfigInvalidError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ConfigInvalidError(f"Invalid config: {e}")


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Save settings to .annogen/config.yaml (or ``path``)"""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json", exclude_none=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    return path


def create_settings(path: Optional[Path] = None) -> Settings:
    """Create and save starter settings"""
    settings = Settings(
        filetypes={
            "python": FiletypeSettings(
                annotation_convention="google_docstrings",
                append={"child_name": "comment", "fallback": "block", "position": "after"},
            ),
            "lua": FiletypeSettings(annotation_convention="emmylua"),
            "javascript": FiletypeSettings(annotation_convention="jsdoc"),
        }
    )
    save_settings(settings, path)
    return settings


def build_templates(settings: Settings) -> Dict[str, TemplateConfig]:
    """Build one template per filetype named in the settings"""
    templates: Dict[str, TemplateConfig] = {}
    filetypes = list(settings.filetypes) + [
        ft for ft in settings.custom_conventions if ft not in settings.filetypes
    ]

    for filetype in filetypes:
        ft = settings.filetypes.get(filetype, FiletypeSettings())
        template = TemplateConfig().configure(ft.template_overrides())

        for name in ft.conventions:
            template.add_annotation(name)
        for name, rules in settings.custom_conventions.get(filetype, {}).items():
            template.add_custom_annotation(name, rules)

        default = template.annotation_convention
        if default is not None and default not in template:
            template.add_default_annotation(default)

        logger.debug(
            "Built template for %s: %s", filetype, sorted(template.annotations)
        )
        templates[filetype] = template

    return templates
