"""
Renderer options for vis-network.

The core never interprets these; they are built from presets, optionally
overridden by a netdiagram.toml file, and passed through to the renderer.

netdiagram.toml example:

    [diagram]
    height = "640px"

    [diagram.physics.stabilization]
    iterations = 100

    [service_map.nodes]
    color = "#54b399"
"""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from netdiagram.config import Settings, get_settings
from netdiagram.core.errors import InputError
from netdiagram.core.schemas import EdgeValueRange

OPTIONS_FILE = "netdiagram.toml"


class _VisModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StabilizationOptions(_VisModel):
    enabled: bool = True
    iterations: int = 50
    update_interval: int = 50


class PhysicsOptions(_VisModel):
    stabilization: StabilizationOptions = Field(default_factory=StabilizationOptions)


class LayoutOptions(_VisModel):
    hierarchical: bool = False
    improved_layout: Optional[bool] = None


class ScalingOptions(_VisModel):
    min: float
    max: float


class EdgeOptions(_VisModel):
    arrows: Optional[Dict[str, Any]] = None
    scaling: Optional[ScalingOptions] = None


class FontOptions(_VisModel):
    size: int = 14
    color: str = "#343434"


class NodeOptions(_VisModel):
    shape: str = "ellipse"
    color: Optional[str] = None
    font: Optional[FontOptions] = None


class InteractionOptions(_VisModel):
    hover: bool = False
    tooltip_delay: int = 300
    selectable: bool = True


class RenderOptions(_VisModel):
    """Top-level vis-network options object."""

    layout: LayoutOptions = Field(default_factory=LayoutOptions)
    edges: EdgeOptions = Field(default_factory=EdgeOptions)
    nodes: Optional[NodeOptions] = None
    physics: Optional[PhysicsOptions] = None
    interaction: Optional[InteractionOptions] = None
    manipulation: Optional[Dict[str, Any]] = None
    height: str = "500px"
    width: Optional[str] = None
    auto_resize: Optional[bool] = None

    def to_vis(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def with_edge_scaling(self, value_range: EdgeValueRange) -> "RenderOptions":
        """Copy with edge widths scaled to the value range; unchanged when the range is empty."""
        if value_range.is_empty:
            return self
        edges = self.edges.model_copy(
            update={"scaling": ScalingOptions(min=value_range.min, max=value_range.max)}
        )
        return self.model_copy(update={"edges": edges})


class Preset(str, Enum):
    """Named option sets."""
    DIAGRAM = "diagram"
    SERVICE_MAP = "service_map"


def diagram_options(settings: Optional[Settings] = None) -> RenderOptions:
    """Options of the network diagram visualization."""
    settings = settings or get_settings()
    return RenderOptions(
        layout=LayoutOptions(hierarchical=False, improved_layout=True),
        height=settings.canvas_height,
        physics=PhysicsOptions(
            stabilization=StabilizationOptions(
                enabled=True,
                iterations=settings.stabilization_iterations,
                update_interval=settings.stabilization_update_interval,
            )
        ),
    )


def service_map_options() -> RenderOptions:
    """Options of the trace analytics service map."""
    return RenderOptions(
        layout=LayoutOptions(hierarchical=False),
        edges=EdgeOptions(arrows={"to": {"enabled": False}}),
        nodes=NodeOptions(shape="dot", color="#adadad", font=FontOptions(size=17, color="#387ab9")),
        interaction=InteractionOptions(hover=True, tooltip_delay=30, selectable=True),
        manipulation={"enabled": False},
        height="434px",
        width="100%",
        auto_resize=True,
    )


def find_options_toml(start_path: Path = Path(".")) -> Optional[Path]:
    """Search for netdiagram.toml in the directory and its parents."""
    current = start_path.resolve()
    for candidate in (current, *current.parents):
        check_path = candidate / OPTIONS_FILE
        if check_path.exists():
            return check_path
    return None


def _camel_keys(table: Dict[str, Any]) -> Dict[str, Any]:
    """Accept snake_case keys in the options file."""
    converted = {}
    for key, value in table.items():
        if "_" in key:
            head, *rest = key.split("_")
            key = head + "".join(word.capitalize() for word in rest)
        converted[key] = _camel_keys(value) if isinstance(value, dict) else value
    return converted


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_render_options(
    preset: Preset = Preset.DIAGRAM,
    settings: Optional[Settings] = None,
    path: Optional[Path] = None,
) -> RenderOptions:
    """Preset options with the matching table of netdiagram.toml applied on top.

    Raises:
        InputError: the options file is not valid TOML or sets invalid options.
    """
    base = diagram_options(settings) if preset == Preset.DIAGRAM else service_map_options()
    toml_path = path or find_options_toml()
    if toml_path is None:
        return base

    try:
        with open(toml_path, "rb") as f:
            table = tomllib.load(f).get(preset.value, {})
        return RenderOptions.model_validate(_deep_merge(base.to_vis(), _camel_keys(table)))
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise InputError(f"Invalid options file {toml_path}: {e}") from e
