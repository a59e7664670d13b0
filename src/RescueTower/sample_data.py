# ============================================================================
# RescueTower - Sample Data and Component Files
#
# Purpose: Built-in seed components and loading components from YAML/JSON
# Inputs: Optional file path
# Outputs: List of validated Components
# Dependencies: pyyaml, catalog, errors
# Usage: components = load_components_file("tower.yaml")
#
# Changelog:
#   2026-03-03: Initial seed set
#   2026-03-08: load_components_file() accepts a bare list or {components: [...]}
#   2026-03-12: Unreadable or undecodable files raise DataLoadError
# ============================================================================

from pathlib import Path
from typing import Any, List, Optional, Union

import yaml  # type: ignore[import-untyped]

from RescueTower.config import CatalogConfig
from RescueTower.catalog import Component, validate_component
from RescueTower.errors import ComponentValidationError, DataLoadError
from RescueTower.logging_utils import get_logger

logger = get_logger(__name__)

SAMPLE_COMPONENTS = (
    Component("Chip Central", "controle", 10),
    Component("Motor Propulsor", "propulsao", 9),
    Component("Antena Satelite", "controle", 8),
    Component("Base Estrutural", "estrutura", 7),
    Component("Painel Solar", "suporte", 6),
    Component("Sistema Navegacao", "controle", 9),
    Component("Tanque Combustivel", "propulsao", 8),
    Component("Escudo Termico", "estrutura", 7),
)


def sample_components() -> List[Component]:
    """Fresh list of the built-in seed components, in seed order."""
    return list(SAMPLE_COMPONENTS)


def parse_components(data: Any, config: Optional[CatalogConfig] = None) -> List[Component]:
    """
    Build validated Components from already-parsed YAML/JSON data.

    Args:
        data: A list of {name, category, priority} mappings, or a mapping with a
            ``components`` key holding such a list
        config: Field constraints (defaults to CatalogConfig())

    Returns:
        Components in file order

    Raises:
        DataLoadError: If the structure is wrong or any entry is invalid
    """
    if isinstance(data, dict):
        data = data.get("components")
    if not isinstance(data, list):
        raise DataLoadError("Expected a list of components (or a mapping with a 'components' list)")

    components = []
    for position, entry in enumerate(data, start=1):
        if not isinstance(entry, dict):
            raise DataLoadError(f"Entry {position} is not a mapping")
        missing = [k for k in ("name", "category", "priority") if k not in entry]
        if missing:
            raise DataLoadError(f"Entry {position} is missing: {', '.join(missing)}")
        component = Component(name=entry["name"], category=entry["category"], priority=entry["priority"])
        try:
            validate_component(component, config)
        except ComponentValidationError as e:
            raise DataLoadError(f"Entry {position} is invalid: {e.message}", details=e.details) from e
        components.append(component)
    return components


def load_components_file(path: Union[str, Path], config: Optional[CatalogConfig] = None) -> List[Component]:
    """
    Load components from a YAML or JSON file (JSON parses as YAML).

    Raises:
        DataLoadError: If the file is missing, unparsable, or holds invalid entries
    """
    file_path = Path(path)
    if not file_path.exists():
        raise DataLoadError(f"Components file not found: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"Could not parse components file: {file_path}", details=str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Could not read components file: {file_path}", details=str(e)) from e

    components = parse_components(data, config)
    logger.info(f"Loaded {len(components)} component(s) from {file_path}")
    return components
