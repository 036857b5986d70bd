"""
Controller metadata files.

Discovery runs elsewhere; its output reaches the command line front-end
as a JSON or YAML list of ``{name, namespace, area}`` records. Optional
fields may be omitted or null.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import yaml

from ..utils.exceptions import InvalidMetadataError
from ..utils.logging import get_logger
from .types import ControllerDefinition

logger = get_logger(__name__)


def controller_from_dict(data: Dict[str, Any]) -> ControllerDefinition:
    """Build a controller definition from one metadata record."""
    if not isinstance(data, dict):
        raise InvalidMetadataError(f"Controller record must be a mapping, got {type(data).__name__}")
    if not data.get("name"):
        raise InvalidMetadataError("Controller record has no name", field="name",
                                   area=data.get("area"), namespace=data.get("namespace"))

    return ControllerDefinition(
        name=str(data["name"]),
        namespace=data.get("namespace") or None,
        area=data.get("area") or "",
    )


def controllers_from_dicts(records: Iterable[Dict[str, Any]]) -> List[ControllerDefinition]:
    return [controller_from_dict(record) for record in records]


def load_controllers(path: Union[str, Path]) -> List[ControllerDefinition]:
    """
    Load controller metadata from a JSON or YAML file.

    The file holds either a list of records or a mapping with a
    ``controllers`` list.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise InvalidMetadataError(f"Failed to load controller metadata: {e}", source=str(path)) from e

    if isinstance(data, dict):
        data = data.get("controllers", [])
    if not isinstance(data, list):
        raise InvalidMetadataError("Controller metadata must be a list of records", source=str(path))

    controllers = controllers_from_dicts(data)
    logger.info(f"Loaded {len(controllers)} controllers from {path}")
    return controllers
