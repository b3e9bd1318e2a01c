from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from domain.gestures import GestureConfig
from domain.models import Color, Size
from domain.services.compose_drawable import DrawConfig, EdgeDrawConfig, VertexDrawConfig
from domain.services.embedding import EngineConfig, ForceConfig

DEFAULT_CONFIG_PATH = Path("config/editor.yaml")


def _validate_hex_color(value: str) -> str:
    normalized = str(value or "").strip()
    Color.from_hex(normalized)
    return normalized.upper() if normalized.startswith("#") else f"#{normalized.upper()}"


HexColor = Annotated[str, AfterValidator(_validate_hex_color)]


class CanvasSettings(BaseModel):
    width: float = Field(800.0, gt=0)
    height: float = Field(600.0, gt=0)

    def to_size(self) -> Size:
        return Size(self.width, self.height)


class GestureSettings(BaseModel):
    drag_min_duration_ms: float = Field(125.0, ge=0)
    drag_min_distance: float = Field(5.0, ge=0)

    def to_gesture_config(self) -> GestureConfig:
        return GestureConfig(
            drag_min_duration=self.drag_min_duration_ms / 1000.0,
            drag_min_distance=self.drag_min_distance,
        )


class ForceSettings(BaseModel):
    edge_rest_length: float = Field(70.0, gt=0)
    repulsion_strength: float = 50.0
    repulsion_half_distance: float = Field(20.0, gt=0)

    def to_force_config(self) -> ForceConfig:
        return ForceConfig(
            edge_rest_length=self.edge_rest_length,
            repulsion_strength=self.repulsion_strength,
            repulsion_half_distance=self.repulsion_half_distance,
        )


class EngineSettings(BaseModel):
    layout_margin: float = 50.0
    alignment_gain: float = 5.0
    gestures: GestureSettings = GestureSettings()
    force: ForceSettings = ForceSettings()


class VertexStyleSettings(BaseModel):
    main_color: HexColor = "#66BFFF"
    border_color: HexColor = "#0052AC"
    main_size: float = Field(12.0, gt=0)
    border_size: float = Field(5.0, ge=0)
    highlight_color: HexColor = "#00E430"
    unhighlight_color: HexColor = "#BE2137"
    drag_color: HexColor = "#0052AC"
    draw_index: bool = True
    zero_indexed: bool = False
    label_color: HexColor = "#000000"
    label_size: float = Field(35.0, gt=0)

    def to_vertex_config(self) -> VertexDrawConfig:
        return VertexDrawConfig(
            main_color=Color.from_hex(self.main_color),
            border_color=Color.from_hex(self.border_color),
            main_size=self.main_size,
            border_size=self.border_size,
            highlight_color=Color.from_hex(self.highlight_color),
            unhighlight_color=Color.from_hex(self.unhighlight_color),
            drag_color=Color.from_hex(self.drag_color),
            draw_index=self.draw_index,
            zero_indexed=self.zero_indexed,
            label_color=Color.from_hex(self.label_color),
            label_size=self.label_size,
        )


class EdgeStyleSettings(BaseModel):
    width: float = Field(5.0, gt=0)
    color: HexColor = "#000000"
    highlight_color: HexColor = "#BE2137"
    unhighlight_color: HexColor = "#C8C8C8"
    draw_index: bool = False
    zero_indexed: bool = False
    label_color: HexColor = "#0079F1"
    label_size: float = Field(40.0, gt=0)

    def to_edge_config(self) -> EdgeDrawConfig:
        return EdgeDrawConfig(
            width=self.width,
            color=Color.from_hex(self.color),
            highlight_color=Color.from_hex(self.highlight_color),
            unhighlight_color=Color.from_hex(self.unhighlight_color),
            draw_index=self.draw_index,
            zero_indexed=self.zero_indexed,
            label_color=Color.from_hex(self.label_color),
            label_size=self.label_size,
        )


class DrawSettings(BaseModel):
    vertex: VertexStyleSettings = VertexStyleSettings()
    edge: EdgeStyleSettings = EdgeStyleSettings()
    background_color: HexColor = "#E8E8E8"


class ControlSettings(BaseModel):
    apply_force: bool = False
    align_to_square_grid: bool = False
    align_to_circular_grid: bool = False
    grid_size: float = Field(30.0, ge=10.0, le=50.0)
    keep_embedding: bool = False


class ExportSettings(BaseModel):
    svg_font_size: float = Field(24.0, gt=0)
    include_grid: bool = False


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEE_", env_nested_delimiter="__")

    canvas: CanvasSettings = CanvasSettings()
    engine: EngineSettings = EngineSettings()
    draw: DrawSettings = DrawSettings()
    controls: ControlSettings = ControlSettings()
    export: ExportSettings = ExportSettings()

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)

    def to_engine_config(self) -> EngineConfig:
        vertex = self.draw.vertex
        return EngineConfig(
            canvas=self.canvas.to_size(),
            layout_margin=self.engine.layout_margin,
            vertex_hit_radius=vertex.main_size + vertex.border_size,
            edge_width=self.draw.edge.width,
            alignment_gain=self.engine.alignment_gain,
            gestures=self.engine.gestures.to_gesture_config(),
            force=self.engine.force.to_force_config(),
        )

    def to_draw_config(self) -> DrawConfig:
        return DrawConfig(
            vertex=self.draw.vertex.to_vertex_config(),
            edge=self.draw.edge.to_edge_config(),
            background_color=Color.from_hex(self.draw.background_color),
        )


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv("GEE_CONFIG_PATH")
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
