"""Layout result model.

Attributes are snake_case in Python; the JSON names are the aliases
(``ID``, ``Anchor``, ``PageDimStatic`` ...). Serialize with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, field_serializer


class Point(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: float = Field(0.0, alias="X")
    y: float = Field(0.0, alias="Y")


class Dim(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    w: float = Field(0.0, alias="W")
    h: float = Field(0.0, alias="H")


class DynamicDim(BaseModel):
    """A size whose axes may be flagged for auto-sizing by the consumer."""

    model_config = ConfigDict(populate_by_name=True)

    dim: Dim = Field(default_factory=Dim, alias="Dim")
    width_is_dynamic: bool = Field(False, alias="WidthIsDynamic")
    height_is_dynamic: bool = Field(False, alias="HeightIsDynamic")


class Layout(BaseModel):
    """Page layout extracted from one SVG document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field("", alias="ID")
    anchor: Point = Field(default_factory=Point, alias="Anchor")
    dim: Dim = Field(default_factory=Dim, alias="Dim")
    anchors: dict[str, Point] = Field(default_factory=dict, alias="Anchors")
    filenames: dict[str, str] = Field(default_factory=dict, alias="Filenames")
    page_dim_static: dict[str, Dim] = Field(default_factory=dict, alias="PageDimStatic")
    page_dim_dynamic: dict[str, DynamicDim] = Field(default_factory=dict, alias="PageDimDynamic")
    previous_image_static: dict[str, Dim] = Field(default_factory=dict, alias="PreviousImageStatic")
    previous_image_dynamic: dict[str, DynamicDim] = Field(
        default_factory=dict, alias="PreviousImageDynamic"
    )

    @field_serializer(
        "anchors",
        "filenames",
        "page_dim_static",
        "page_dim_dynamic",
        "previous_image_static",
        "previous_image_dynamic",
        mode="wrap",
    )
    def _sorted_map(
        self, value: dict[str, Any], handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        return dict(sorted(handler(value).items()))
