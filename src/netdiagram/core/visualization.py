"""Registration metadata of the network diagram visualization."""

from typing import List

from pydantic import BaseModel, Field

from netdiagram.core.errors import ConfigurationError
from netdiagram.core.schemas import ValueOptions


class ValueOptionSchema(BaseModel):
    """One selector of the data panel's value options section."""
    name: str = Field(..., description="Label shown in the editor")
    map_to: str = Field(..., description="ValueOptions attribute it fills")
    is_single_selection: bool = True


class VisualizationType(BaseModel):
    name: str
    label: str
    icon_type: str
    category: str
    value_options: List[ValueOptionSchema] = Field(default_factory=list)


NETWORK_DIAGRAM = VisualizationType(
    name="network_diagram",
    label="Network Diagram",
    icon_type="visLine",
    category="basics",
    value_options=[
        ValueOptionSchema(name="Source", map_to="source"),
        ValueOptionSchema(name="Destination", map_to="dest"),
    ],
)


def validate_value_options(options: ValueOptions, vis_type: VisualizationType = NETWORK_DIAGRAM) -> ValueOptions:
    """Reject selections holding several fields where the editor allows only one."""
    for schema in vis_type.value_options:
        selected = getattr(options, schema.map_to)
        if schema.is_single_selection and len(selected) > 1:
            names = ", ".join(f.name for f in selected)
            raise ConfigurationError(f"{schema.name} accepts a single field, got: {names}")
    return options
